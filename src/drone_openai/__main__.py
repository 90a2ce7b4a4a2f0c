from drone_openai.cli import main


raise SystemExit(main())

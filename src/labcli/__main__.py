from labcli.cli import main

raise SystemExit(main())

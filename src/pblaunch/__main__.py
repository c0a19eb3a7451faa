from pblaunch import cli

raise SystemExit(cli.main())

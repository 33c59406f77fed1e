from wakeonlan.cli import main

raise SystemExit(main())

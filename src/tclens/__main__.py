from tclens.cli import main

raise SystemExit(main())

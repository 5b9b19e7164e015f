from flagpreview.cli import main

raise SystemExit(main())

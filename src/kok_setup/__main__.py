from kok_setup.cli import main

raise SystemExit(main())

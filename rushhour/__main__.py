from rushhour.cli import main

raise SystemExit(main())

from rlstats.cli import main

raise SystemExit(main())

from cournot_ga.cli import main

raise SystemExit(main())

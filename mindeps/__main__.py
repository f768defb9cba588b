from mindeps.cli import main

raise SystemExit(main())

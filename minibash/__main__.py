from minibash.cli import main

raise SystemExit(main())

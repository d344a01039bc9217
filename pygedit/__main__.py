from pygedit.main import main

raise SystemExit(main())

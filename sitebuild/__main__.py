from sitebuild.cli import main

raise SystemExit(main())

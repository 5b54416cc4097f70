from pitchscan.cli import main

raise SystemExit(main())

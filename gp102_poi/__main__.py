from gp102_poi.run import main

raise SystemExit(main())

from sentence_synth.cli.cli import main

raise SystemExit(main())

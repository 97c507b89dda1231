import sys

from tracker_cli.main import main

sys.exit(main())

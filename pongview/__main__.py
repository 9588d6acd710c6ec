import sys

from pongview.app import main

sys.exit(main())

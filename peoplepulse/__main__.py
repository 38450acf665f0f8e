import sys

from peoplepulse.cli import main

sys.exit(main())

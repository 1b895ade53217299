import sys

from keyscan.cli import main

sys.exit(main())

import sys

from sdotool.cli import main

sys.exit(main())

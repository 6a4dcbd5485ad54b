import sys

from monkeysim.cli import main

sys.exit(main())

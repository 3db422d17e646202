import sys

from elmerlint.cli import main

sys.exit(main())

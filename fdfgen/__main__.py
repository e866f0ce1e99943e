import sys

from fdfgen.cli import main

sys.exit(main())

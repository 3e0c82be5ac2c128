import sys

from yamlfmt.cli import main

sys.exit(main())

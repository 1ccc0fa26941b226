import sys

from staticpages.cli import main

sys.exit(main())

import sys

from sharerecover.cli import main

sys.exit(main())

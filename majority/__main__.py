import sys

from majority.cli import main

sys.exit(main())

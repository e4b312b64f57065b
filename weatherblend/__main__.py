import sys

from weatherblend.cli import main

sys.exit(main())

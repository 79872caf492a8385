import sys

from huffcode.cli import main

sys.exit(main())

import sys

from elot743.cli import main

sys.exit(main())

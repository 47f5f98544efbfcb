import sys

from bigdecimal.cli import main

sys.exit(main())

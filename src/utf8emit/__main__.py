import sys

from utf8emit.cli import main

sys.exit(main())

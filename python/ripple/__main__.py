import sys

from ripple._cli import main

sys.exit(main())

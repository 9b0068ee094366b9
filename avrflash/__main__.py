import sys

from avrflash.cli import main


sys.exit(main())

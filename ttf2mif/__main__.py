import sys

from ttf2mif.cli import main

sys.exit(main())

import sys

from sidesreader.main import main

sys.exit(main())

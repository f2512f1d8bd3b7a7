import sys

from segtri.core.cli import main

sys.exit(main())

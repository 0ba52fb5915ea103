"""``python -m pgnkit``"""

import sys

from pgnkit.cli import main

sys.exit(main())

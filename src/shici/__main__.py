"""python -m shici"""

import sys

from shici.main import main

sys.exit(main())

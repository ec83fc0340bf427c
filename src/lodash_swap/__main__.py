import sys

from lodash_swap.cli import main

sys.exit(main())

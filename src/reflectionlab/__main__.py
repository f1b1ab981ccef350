import sys

from reflectionlab.cli import main

sys.exit(main())

import sys

from pgncoord.app import main

sys.exit(main())

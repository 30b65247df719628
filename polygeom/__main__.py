import sys

from polygeom.main import main

sys.exit(main())

import sys

from treemenu.main import main

sys.exit(main())

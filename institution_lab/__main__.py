import sys

from institution_lab.main import main

sys.exit(main())

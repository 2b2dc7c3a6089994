import sys

from git_tidy.cli import main

sys.exit(main())

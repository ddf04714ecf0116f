import sys

from ffbuild.cli import main

sys.exit(main())

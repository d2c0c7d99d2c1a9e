"""Entry point for python -m onamer."""

import sys

from onamer.cli import main

sys.exit(main())

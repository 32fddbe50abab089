"""Entry point for ``python -m tagselector``."""

import sys

from tagselector.cli import main

sys.exit(main())

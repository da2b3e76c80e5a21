"""Allow running as `python -m genealogy_filename`."""

import sys

from genealogy_filename.cli import main


sys.exit(main())

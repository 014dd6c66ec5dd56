"""Allow running the CLI with ``python -m dummy_file_creator``."""

from __future__ import annotations

import sys

from dummy_file_creator.main import main

sys.exit(main())

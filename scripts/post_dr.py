#!/usr/bin/env python3
"""Post a data request using the settings in .env and print the result."""

import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from seda_dr.cli import main  # noqa: E402

if __name__ == "__main__":
    main()

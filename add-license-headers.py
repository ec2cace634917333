#!/usr/bin/env python3
from __future__ import annotations

import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parent

# Run from a checkout without installing the package.
sys.path.insert(0, str(ROOT))

from license_headers.cli import main  # noqa: E402

if __name__ == "__main__":
    raise SystemExit(main())

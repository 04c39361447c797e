#!/usr/bin/env python
"""Example app: configure a listener entirely from EXAMPLE_* variables.

    EXAMPLE_PORT=8080 python scripts/example_app.py
    python scripts/example_app.py --help
"""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Optional, Sequence

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from envdoc import Registry  # noqa: E402
from envdoc.config import settings  # noqa: E402


def build_registry() -> Registry:
    registry = Registry()
    registry.set_prefix("EXAMPLE_")
    registry.declare_optional_int("PORT", "The port to listen to", 1234)
    registry.declare_optional_string("HOST", "The host to listen to", "0.0.0.0")
    registry.declare_optional_bool("DEBUG", "Start in debug mode", True)
    return registry


def main(argv: Optional[Sequence[str]] = None) -> int:
    settings.setup_logging()
    registry = build_registry()
    registry.parse(argv)

    host = registry.get_string("HOST")
    port = registry.get_int("PORT")
    debug = registry.get_bool("DEBUG")

    print(f"Host: {host}, Port: {port}, Debug: {'true' if debug else 'false'}")
    return 0


if __name__ == "__main__":
    sys.exit(main())

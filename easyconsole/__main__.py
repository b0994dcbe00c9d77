#!/usr/bin/env python3
# easyconsole/__main__.py
from __future__ import annotations

import asyncio
import sys

from easyconsole.errors import ConfigurationError
from easyconsole.interface import run_console


def main() -> int:
    try:
        asyncio.run(run_console())
    except ConfigurationError as exc:
        print(f"Configuration error: {exc}", file=sys.stderr)
        return 2
    except KeyboardInterrupt:
        return 130
    return 0


if __name__ == "__main__":
    sys.exit(main())

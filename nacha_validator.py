"""Compatibility module ``nacha_validator``.

Re-exports the public API of the ``nacha`` package and keeps the command
line entry point.
"""

import logging
import sys

from nacha import *  # noqa: F401,F403
from nacha import __all__ as _NACHA_ALL
from nacha.cli import main

__all__ = list(_NACHA_ALL) + ["main"]


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    sys.exit(main())

#!/usr/bin/env python3
"""
支持直接通过 python -m 运行：
python -m binoxxo --mode generate --difficulty medium
"""

import sys

from .cli import main

if __name__ == "__main__":
    sys.exit(main())

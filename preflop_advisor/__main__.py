#!/usr/bin/env python3
"""Allow ``python -m preflop_advisor``."""

import sys

from preflop_advisor.cli import main

sys.exit(main())

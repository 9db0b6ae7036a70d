#!/usr/bin/env python3
"""
Preflop advisor: suggests raise, call or fold for two hole cards.
"""

__version__ = "1.0.0"

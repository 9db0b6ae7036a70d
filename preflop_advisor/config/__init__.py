#!/usr/bin/env python3
"""
Settings management for the preflop advisor.
"""

from .settings import Settings

__all__ = ['Settings']

#!/usr/bin/env python3
"""
Parsers for hole cards and amounts typed at the command line.
"""

#!/usr/bin/env python3
"""
Input validation errors raised by the advisor.
"""

import math
import logging

logger = logging.getLogger(__name__)


class InvalidInputError(ValueError):
    """Raised when a rank, suit, amount or player count is out of range."""


def require_non_negative(name: str, value: float) -> None:
    """Reject negative or non-finite money amounts and player counts."""
    if not math.isfinite(value) or value < 0:
        logger.warning(f"Rejected {name}: {value}")
        raise InvalidInputError(f"{name} must be a finite non-negative number, got {value}")

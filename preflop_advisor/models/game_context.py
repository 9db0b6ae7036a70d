#!/usr/bin/env python3
"""
GameContext model for the betting situation in front of the hero.

Holds the blinds, how many players limped in behind the big blind and the
amount hero must put in to call.
"""

from pydantic import BaseModel, Field


class GameContext(BaseModel):
    """Caller-supplied betting situation for one preflop decision."""
    small_blind: float = Field(..., ge=0, description="Small blind amount")
    big_blind: float = Field(..., ge=0, description="Big blind amount")
    players_called: int = Field(0, ge=0, description="Players who called the big blind")
    to_call: float = Field(..., gt=0, description="Amount needed to call")

    class Config:
        validate_assignment = True
        extra = "forbid"
        allow_inf_nan = False

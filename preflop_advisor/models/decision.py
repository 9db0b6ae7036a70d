#!/usr/bin/env python3
"""
Decision model for preflop advisor recommendations.

A decision is one of raise, call or fold. Only a raise carries an amount,
which is always a non-negative multiple of 0.5.
"""

from enum import Enum
from pydantic import BaseModel, Field, model_validator
from typing import Optional


class Action(str, Enum):
    """Preflop actions the advisor can recommend."""
    RAISE = 'raise'
    CALL = 'call'
    FOLD = 'fold'


class Decision(BaseModel):
    """Preflop advisor recommendation."""
    action: Action = Field(..., description="Recommended action (raise/call/fold)")
    amount: Optional[float] = Field(None, ge=0, description="Raise amount, only set for a raise")
    hand_strength: int = Field(..., description="Hand strength tier the decision was based on")
    pot_odds: float = Field(..., ge=0.0, description="Pot odds as a percentage of the call")
    pot_size: float = Field(..., ge=0.0, description="Pot size the decision was based on")
    reasoning: str = Field("", description="Explanation of decision")

    @model_validator(mode='after')
    def validate_amount_matches_action(self):
        if self.action is Action.RAISE:
            if self.amount is None:
                raise ValueError('A raise decision requires an amount')
            if (self.amount * 2) != int(self.amount * 2):
                raise ValueError(f'Raise amount must be a multiple of 0.5, got {self.amount}')
        elif self.amount is not None:
            raise ValueError(f'Only a raise carries an amount, got {self.action.value} {self.amount}')
        return self

    @property
    def is_raise(self) -> bool:
        return self.action is Action.RAISE

    class Config:
        frozen = True
        extra = "forbid"
        allow_inf_nan = False

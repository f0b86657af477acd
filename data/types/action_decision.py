from typing import Optional

from pydantic import BaseModel, model_validator

from data.enums import ActionType


class ActionDecision(BaseModel):
    """
    Represents a betting decision made by a seat.

    Attributes:
        action_type: The type of action to take
        raise_amount: Chips to put in on top of the call amount, required for raises
        reasoning: Optional free text shown in the logs
    """

    action_type: ActionType
    raise_amount: Optional[int] = None
    reasoning: Optional[str] = None

    @model_validator(mode="after")
    def validate_raise_amount(self):
        if self.action_type == ActionType.RAISE:
            if self.raise_amount is None:
                raise ValueError("raise_amount is required when action_type is raise")
            if self.raise_amount <= 0:
                raise ValueError("raise_amount must be positive")
        return self

    def __str__(self) -> str:
        """Human readable string showing action type, amount (if raise), and reasoning."""
        base = f"Action: {self.action_type.value}"
        if self.action_type == ActionType.RAISE:
            base += f" {self.raise_amount}"
        if self.reasoning:
            base += f" - {self.reasoning}"
        return base

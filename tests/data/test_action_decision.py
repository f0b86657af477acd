import pytest
from pydantic import ValidationError

from data.enums import ActionType
from data.types.action_decision import ActionDecision


class TestActionDecision:
    def test_simple_actions(self):
        for action in (ActionType.FOLD, ActionType.CHECK, ActionType.CALL):
            decision = ActionDecision(action_type=action)
            assert decision.raise_amount is None

    def test_raise_requires_amount(self):
        with pytest.raises(ValidationError):
            ActionDecision(action_type=ActionType.RAISE)

    @pytest.mark.parametrize("amount", [0, -5])
    def test_raise_amount_must_be_positive(self, amount):
        with pytest.raises(ValidationError):
            ActionDecision(action_type=ActionType.RAISE, raise_amount=amount)

    def test_action_from_string_value(self):
        decision = ActionDecision(action_type="call")
        assert decision.action_type == ActionType.CALL

    def test_unknown_action(self):
        with pytest.raises(ValidationError):
            ActionDecision(action_type="draw")

    def test_str(self):
        assert str(ActionDecision(action_type=ActionType.FOLD)) == "Action: fold"
        decision = ActionDecision(
            action_type=ActionType.RAISE, raise_amount=4, reasoning="random"
        )
        assert str(decision) == "Action: raise 4 - random"

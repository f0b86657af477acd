class PokerGameError(Exception):
    """Base exception for poker game errors."""

    pass


class InvalidHandError(PokerGameError):
    """Raised when cards handed to the evaluator do not form a valid hand."""

    pass


class InvalidGameStateError(PokerGameError):
    """Raised when game state is invalid."""

    pass


class InvalidActionError(PokerGameError):
    """Raised when player action is invalid."""

    pass


class DeckExhaustedError(PokerGameError):
    """Raised when a card is requested from an empty deck."""

    pass

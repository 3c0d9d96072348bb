"""Errors raised for malformed requests to the deck engine."""


class DeckError(ValueError):
    """Base class for caller-input errors raised by the engine."""


class InvalidHandSize(DeckError):
    """A hand submitted for evaluation does not hold exactly five cards."""

    def __init__(self, size: int, required: int = 5):
        self.size = size
        self.required = required
        super().__init__(
            f"Hand evaluation requires exactly {required} cards, got {size}"
        )


class InsufficientCards(DeckError):
    """More cards were requested than the sequence holds."""

    def __init__(self, requested: int, available: int):
        self.requested = requested
        self.available = available
        super().__init__(
            f"Cannot draw {requested} cards, only {available} remaining"
        )

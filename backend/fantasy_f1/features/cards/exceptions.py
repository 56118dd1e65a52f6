"""Card feature errors."""


class CardError(Exception):
    """Base power card error."""
    pass


class EffectValueError(CardError):
    """A card's effect_value does not fit its effect type."""
    pass


class DeckValidationError(CardError):
    """A deck breaks the deck-building rules."""
    pass


class CardActivationError(CardError):
    """A card cannot be activated for this race."""
    pass


class CardResolutionError(CardError):
    """A Mystery/Random card could not be resolved to a playable card."""
    pass

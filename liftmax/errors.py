"""Exceptions raised by the 1RM estimation core."""


class LiftMaxError(ValueError):
    """Base class for liftmax errors."""


class InvalidArgument(LiftMaxError):
    """Non-positive weight, bad rep count or unknown category."""


class DomainError(LiftMaxError):
    """A formula was evaluated outside its safe rep range."""

"""Domain exceptions."""


class InvalidInputError(ValueError):
    """Raised when forecast inputs are malformed (negative counts, bad controls, ...)."""

"""Base exceptions for optargs domain."""


class OptArgsError(Exception):
    """Root exception for all optargs errors.

    All domain exceptions inherit from this.
    Allows catching all optargs-specific errors.
    """

class BignException(Exception):
    """Base exception for all fixed-point domain errors."""

    pass

# guppy/errors.py


class InvalidInput(ValueError):
    """Price series is missing or too short to compute the GMMA."""

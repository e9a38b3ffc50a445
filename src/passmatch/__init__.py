"""passmatch — domain lookup over a pass-style password store."""

__version__ = "0.1.0"

"""Fantasy F1 scoring engine: race scoring with power cards."""

__version__ = "0.1.0"

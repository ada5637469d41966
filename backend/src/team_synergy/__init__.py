"""Team-composition synergy and counter-recommendation engine."""

__version__ = "0.1.0"

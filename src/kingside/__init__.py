"""kingside: chess rules engine with a fixed-depth negamax opponent."""

__version__ = "0.1.0"

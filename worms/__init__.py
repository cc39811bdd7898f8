"""Turn-based artillery worms: stat invariants, movement and weapon rules."""

__version__ = "0.1.0"

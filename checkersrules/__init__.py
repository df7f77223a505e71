"""Rules engine for 8x8 checkers: board rules in ``rules``, turn state in ``game``."""

__version__ = "0.1.0"
__all__ = ["game", "rules"]
from .checker import CLOSING, OPENING, PAIRS, check, is_balanced
from .schemas import Verdict
from .stack import Stack

__all__ = ["CLOSING", "OPENING", "PAIRS", "Stack", "Verdict", "check", "is_balanced"]

import logging
from types import MappingProxyType

from .schemas import Verdict
from .stack import Stack

logger = logging.getLogger(__name__)

PAIRS = MappingProxyType({')': '(', ']': '[', '}': '{'})
OPENING = frozenset(PAIRS.values())
CLOSING = frozenset(PAIRS.keys())


def is_balanced(expression: str) -> bool:
    """Check that (), [] and {} in ``expression`` are correctly nested and closed.

    Any other character is ignored. Stops at the first closer that has no
    opener or closes the wrong type.
    """
    if not isinstance(expression, str):
        raise TypeError(f"expression must be str, not {type(expression).__name__}")

    stack = Stack()

    for char in expression:
        if char in OPENING:
            stack.push(char)
        elif char in CLOSING:
            if stack.is_empty():
                return False
            if stack.pop() != PAIRS[char]:
                return False

    return stack.is_empty()


def check(expression: str) -> Verdict:
    verdict = Verdict(expression=expression, balanced=is_balanced(expression))
    logger.debug(f"{expression!r} -> {'balanced' if verdict.balanced else 'unbalanced'}")
    return verdict

from typing import List, Optional


class Stack:
    """Last-in-first-out container of delimiter characters."""

    def __init__(self):
        self._items: List[str] = []

    def is_empty(self) -> bool:
        return not self._items

    def push(self, char: str):
        self._items.append(char)

    def pop(self) -> Optional[str]:
        """Remove and return the top character, or ``None`` when the stack is empty."""
        return self._items.pop() if self._items else None

    def peek(self) -> Optional[str]:
        """Return the top character without removing it, or ``None`` when empty."""
        return self._items[-1] if self._items else None

    def size(self) -> int:
        return len(self._items)

    def __len__(self) -> int:
        return len(self._items)

from typing import Optional


class FieldBodyCache:
    """Two-state cache of a rendered field body: stale, or fresh with a value.

    ``invalidate()`` is the single way back to stale and ``set()`` the single
    way to fresh. A fresh empty string is a value, not a miss.
    """

    def __init__(self):
        self._value: Optional[str] = None
        self._fresh = False

    @property
    def is_fresh(self) -> bool:
        return self._fresh

    def get(self) -> Optional[str]:
        return self._value if self.is_fresh else None

    def set(self, value: str) -> None:
        self._value = value
        self._fresh = True

    def invalidate(self) -> None:
        self._value = None
        self._fresh = False

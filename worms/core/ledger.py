"""Resource ledger: bounded integer point pools.

Spending never raises. An overdraft clamps the pool to zero instead, so a
pool is never left outside ``0 <= current <= maximum``.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True)
class PointPool:
    """A current/maximum pair of integer points."""

    current: int
    maximum: int

    @classmethod
    def full(cls, maximum: int) -> PointPool:
        return cls(current=maximum, maximum=maximum)

    @property
    def empty(self) -> bool:
        return self.current == 0

    def can_have_as_current(self, value: int) -> bool:
        return 0 <= value <= self.maximum

    def can_have_as_maximum(self, value: int) -> bool:
        return value >= 0 and value >= self.current

    def spend(self, amount: int) -> int:
        """Spend *amount*, clamping at zero. Negative amounts are ignored.

        Returns the number of points actually removed.
        """
        if amount < 0:
            return 0
        before = self.current
        if self.current - amount >= 0:
            self.current -= amount
        else:
            self.current = 0
        return before - self.current

    def deduct_to_live(self, amount: int) -> int:
        """Like :meth:`spend` but anything that does not leave a positive
        balance drops the pool to exactly zero."""
        if amount < 0:
            return 0
        before = self.current
        if self.current - amount > 0:
            self.current -= amount
        else:
            self.current = 0
        return before - self.current

    def drain(self) -> int:
        return self.spend(self.current)

    def refill(self) -> None:
        self.current = self.maximum

    def regenerate(self, amount: int) -> None:
        """Add *amount*, or top up to the maximum when that would overshoot."""
        if self.can_have_as_current(self.current + amount):
            self.current += amount
        else:
            self.current = self.maximum

    def resize(self, maximum: int) -> None:
        if not self.can_have_as_maximum(maximum):
            raise ValueError(f"maximum {maximum} below current {self.current}")
        self.maximum = maximum

from __future__ import annotations

import math
from dataclasses import dataclass


@dataclass(frozen=True)
class SymbolicNumber:
    """Algebraic constant carrying both its closed form and its float value."""

    text: str
    value: float

    def __post_init__(self) -> None:
        object.__setattr__(self, "value", float(self.value))

    def __float__(self) -> float:
        return self.value

    def __str__(self) -> str:
        return self.text

    def __repr__(self) -> str:
        return f"SymbolicNumber(text={self.text!r}, value={self.value!r})"

    def isclose(self, other: float, *, rel_tol: float = 1e-12) -> bool:
        return math.isclose(self.value, float(other), rel_tol=rel_tol)


SQRT2 = math.sqrt(2.0)
SQRT3 = math.sqrt(3.0)
SQRT5 = math.sqrt(5.0)

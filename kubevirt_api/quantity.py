"""Resource quantities such as ``8192Ki``, ``64M`` or ``500m``."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from fractions import Fraction

_BINARY_SUFFIXES = {
    "Ki": 2**10,
    "Mi": 2**20,
    "Gi": 2**30,
    "Ti": 2**40,
    "Pi": 2**50,
    "Ei": 2**60,
}

_DECIMAL_SUFFIXES = {
    "n": Fraction(1, 10**9),
    "u": Fraction(1, 10**6),
    "m": Fraction(1, 10**3),
    "": Fraction(1),
    "k": Fraction(10**3),
    "M": Fraction(10**6),
    "G": Fraction(10**9),
    "T": Fraction(10**12),
    "P": Fraction(10**15),
    "E": Fraction(10**18),
}

_QUANTITY_RE = re.compile(
    r"""
    ^(?P<number>[+-]?(?:\d+\.?\d*|\.\d+))
    (?P<suffix>Ki|Mi|Gi|Ti|Pi|Ei|[eE][+-]?\d+|[numkMGTPE])?$
    """,
    re.VERBOSE,
)


@dataclass(frozen=True, eq=False)
class Quantity:
    """An exact amount of a resource together with the text it was written as."""

    value: Fraction
    text: str = field(default="0")

    @classmethod
    def zero(cls) -> Quantity:
        """The quantity used when a resource is not given at all."""
        return cls(Fraction(0), "0")

    def is_zero(self) -> bool:
        return self.value == 0

    def compare(self, other: Quantity) -> int:
        """Return -1, 0 or 1 as this quantity is less than, equal to or greater than ``other``."""
        if self.value < other.value:
            return -1
        if self.value > other.value:
            return 1
        return 0

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Quantity):
            return NotImplemented
        return self.value == other.value

    def __lt__(self, other: Quantity) -> bool:
        return self.compare(other) < 0

    def __le__(self, other: Quantity) -> bool:
        return self.compare(other) <= 0

    def __gt__(self, other: Quantity) -> bool:
        return self.compare(other) > 0

    def __ge__(self, other: Quantity) -> bool:
        return self.compare(other) >= 0

    def __hash__(self) -> int:
        return hash(self.value)

    def __str__(self) -> str:
        return self.text


def parse_quantity(text: str) -> Quantity:
    """Parse a quantity string, raising ValueError when it is malformed."""
    if not isinstance(text, str):
        raise TypeError(f"quantity must be a string, not {type(text).__name__}")
    stripped = text.strip()
    match = _QUANTITY_RE.match(stripped)
    if match is None:
        raise ValueError(f"quantities must match the regular expression: {text!r}")

    number = Fraction(match.group("number"))
    suffix = match.group("suffix") or ""

    if suffix in _BINARY_SUFFIXES:
        multiplier = Fraction(_BINARY_SUFFIXES[suffix])
    elif suffix in _DECIMAL_SUFFIXES:
        multiplier = _DECIMAL_SUFFIXES[suffix]
    else:
        multiplier = Fraction(10) ** int(suffix[1:])

    return Quantity(number * multiplier, stripped)
from __future__ import annotations

import itertools
from collections.abc import Iterator, Sequence
from dataclasses import astuple, dataclass
from enum import IntEnum
from typing import Tuple, Union

from .config import HEAP_BOUNDS, HEAP_COUNT, PARITY_BITS

Bounds = Tuple[int, ...]


class Conclusion(IntEnum):
    UNKNOWN = 0
    WINNING = 1
    LOSING = 2

    def __str__(self) -> str:
        return self.name.capitalize()


@dataclass(frozen=True, order=True)
class State:
    h0: int
    h1: int
    h2: int
    h3: int

    def __iter__(self) -> Iterator[int]:
        return iter(astuple(self))

    def __str__(self) -> str:
        return f"State({self.h0}, {self.h1}, {self.h2}, {self.h3})"

    @classmethod
    def of(cls, heaps: Sequence[int]) -> "State":
        if len(heaps) != HEAP_COUNT:
            raise ValueError(f"expected {HEAP_COUNT} heaps, got {len(heaps)}")
        return cls(*(int(h) for h in heaps))

    def is_child_of(self, parent: "State") -> bool:
        return is_child_of(self, parent)

    def parity(self) -> int:
        return parity(self)


def cmp(a: Union[int, float], b: Union[int, float]) -> int:
    """Compare two numbers and return -1, 0, or 1 (spaceship operator)."""
    return (a > b) - (a < b)


def validate_bounds(bounds: Sequence[int]) -> Bounds:
    bounds = tuple(int(b) for b in bounds)
    if len(bounds) != HEAP_COUNT:
        raise ValueError(f"expected {HEAP_COUNT} heap bounds, got {len(bounds)}")
    if any(b < 0 for b in bounds):
        raise ValueError(f"heap bounds must be non-negative: {bounds}")
    return bounds


def space_size(bounds: Sequence[int] = HEAP_BOUNDS) -> int:
    size = 1
    for bound in bounds:
        size *= bound + 1
    return size


def product_ranges(bounds: Sequence[int] = HEAP_BOUNDS) -> Iterator[Tuple[int, ...]]:
    """Yield every heap tuple with 0 <= h[i] <= bounds[i], last heap varying fastest."""
    return itertools.product(*(range(b + 1) for b in bounds))


def iter_states(bounds: Sequence[int] = HEAP_BOUNDS) -> Iterator[State]:
    for heaps in product_ranges(validate_bounds(bounds)):
        yield State(*heaps)


def in_bounds(heaps: Sequence[int], bounds: Sequence[int] = HEAP_BOUNDS) -> bool:
    if len(heaps) != len(bounds):
        return False
    return all(0 <= h <= b for h, b in zip(heaps, bounds))


def encode_index(heaps: Sequence[int], bounds: Sequence[int] = HEAP_BOUNDS) -> int:
    """Mixed-radix index of a state; equals its position in lexicographic order."""
    if not in_bounds(heaps, bounds):
        raise KeyError(tuple(heaps))
    idx = 0
    for h, b in zip(heaps, bounds):
        idx = idx * (b + 1) + int(h)
    return idx


def decode_index(idx: int, bounds: Sequence[int] = HEAP_BOUNDS) -> State:
    idx = int(idx)
    if idx < 0 or idx >= space_size(bounds):
        raise KeyError(idx)
    heaps = []
    for b in reversed(bounds):
        idx, h = divmod(idx, b + 1)
        heaps.append(h)
    return State(*reversed(heaps))


def is_child_of(child: Sequence[int], parent: Sequence[int]) -> bool:
    # Exactly one heap strictly smaller, the rest unchanged.
    order = [cmp(c, p) for c, p in zip(child, parent)]
    return order.count(-1) == 1 and order.count(0) == len(order) - 1


def parity_ones(values: Sequence[int]) -> int:
    return sum(v & 1 for v in values) % 2


def parity(heaps: Sequence[int]) -> int:
    """Sum of the per-bit-plane parities across the heaps (planes 1, 2 and 4)."""
    heaps = tuple(heaps)
    return sum(parity_ones([h >> bit for h in heaps]) for bit in range(PARITY_BITS))


def nim_sum(heaps: Sequence[int]) -> int:
    total = 0
    for h in heaps:
        total ^= int(h)
    return total

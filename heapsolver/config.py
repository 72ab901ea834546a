from __future__ import annotations

# Largest count each heap may hold; a heap ranges over 0..bound.
HEAP_BOUNDS: tuple[int, int, int, int] = (1, 3, 5, 7)
HEAP_COUNT = len(HEAP_BOUNDS)
ZERO_STATE: tuple[int, int, int, int] = (0, 0, 0, 0)

# Bit planes inspected by the parity diagnostic (values 1, 2, 4).
PARITY_BITS = 3

DEFAULT_JSON_INDENT = 2

"""Cross-check a solved table against the closed form for misère Nim.

The solver seeds the empty position as Losing, so "Winning" marks the
positions that are good to leave behind when the player taking the last
object loses.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import List, Tuple

from .common import Conclusion, State, nim_sum
from .space import GameStateSpace


def expected_conclusion(heaps: Sequence[int]) -> Conclusion:
    heaps = tuple(int(h) for h in heaps)
    if all(h <= 1 for h in heaps):
        # Only single objects left: an odd count forces the mover to take the last one.
        return Conclusion.WINNING if sum(heaps) % 2 == 1 else Conclusion.LOSING
    return Conclusion.WINNING if nim_sum(heaps) == 0 else Conclusion.LOSING


def find_mismatches(space: GameStateSpace) -> List[Tuple[State, Conclusion, Conclusion]]:
    mismatches = []
    for state, got in space.items():
        want = expected_conclusion(state)
        if got != want:
            mismatches.append((state, got, want))
    return mismatches


def print_mismatches(mismatches: List[Tuple[State, Conclusion, Conclusion]], limit: int = 10) -> None:
    print(f"Theory mismatches: {len(mismatches)}")
    for state, got, want in mismatches[:limit]:
        print(f"  {state}: solved {got!s}, expected {want!s}")

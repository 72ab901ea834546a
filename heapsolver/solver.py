"""Retrograde (backward-induction) solver for the heap game"""

from __future__ import annotations

from typing import Callable, Optional

from . import stats
from .common import Conclusion
from .space import GameStateSpace

RoundHook = Callable[[int, GameStateSpace], None]


class RetrogradeSolver:
    """Drive a GameStateSpace to its fixed point.

    Each round applies two rules, both of which only ever promote
    Unknown entries:

    * a state all of whose children are Losing is Winning;
    * every parent of a Winning state is Losing.

    Moves strictly shrink one heap, so the move graph is acyclic and
    every round settles at least the lowest unknown state.
    """

    def __init__(self, space: GameStateSpace, *, on_round: Optional[RoundHook] = None) -> None:
        self.space = space
        self.on_round = on_round
        self.rounds = 0

    def _forced_wins(self) -> int:
        space = self.space
        promoted = 0
        for state in space.unsolved_states():
            stats.children_scans += 1
            if all(space.is_losing(child) for child in space.children_of(state)):
                space.mark(state, Conclusion.WINNING)
                promoted += 1
        stats.promoted_winning += promoted
        return promoted

    def _forced_losses(self) -> int:
        space = self.space
        promoted = 0
        for win in space.winning_states():
            stats.parent_scans += 1
            for parent in space.parents_of(win):
                if space[parent] == Conclusion.UNKNOWN:
                    space.mark(parent, Conclusion.LOSING)
                    promoted += 1
        stats.promoted_losing += promoted
        return promoted

    def run_round(self) -> int:
        """Apply both rules once; returns the number of states promoted."""
        return self._forced_wins() + self._forced_losses()

    def solve(self) -> int:
        while not self.space.is_solved():
            promoted = self.run_round()
            self.rounds += 1
            stats.rounds += 1
            if self.on_round is not None:
                self.on_round(self.rounds, self.space)
            if promoted == 0:
                remaining = len(self.space.unsolved_states())
                raise RuntimeError(f"solver stalled after {self.rounds} rounds with {remaining} unknown states")
        return self.rounds


def solve(space: GameStateSpace, on_round: Optional[RoundHook] = None) -> int:
    return RetrogradeSolver(space, on_round=on_round).solve()

from __future__ import annotations

from collections.abc import Iterator, Mapping, Sequence
from typing import Dict, List

import numpy as np

from .common import Conclusion, State, encode_index, in_bounds, iter_states, validate_bounds
from .config import HEAP_BOUNDS, ZERO_STATE


class GameStateSpace(Mapping[State, Conclusion]):
    """Classification table over every heap tuple within the bounds.

    States are stored in lexicographic order, so a state's row is its
    mixed-radix index. Adjacency queries scan the whole table each call.
    """

    __slots__ = ("_bounds", "_states", "_conclusions")

    def __init__(self, bounds: Sequence[int] = HEAP_BOUNDS) -> None:
        self._bounds = validate_bounds(bounds)
        self._states = np.array([tuple(s) for s in iter_states(self._bounds)], dtype=np.int16)
        self._conclusions = np.full(len(self._states), Conclusion.UNKNOWN, dtype=np.int8)
        self._conclusions[self._index(State(*ZERO_STATE))] = Conclusion.LOSING

    @property
    def bounds(self) -> tuple[int, ...]:
        return self._bounds

    @property
    def states(self) -> np.ndarray:
        """Read-only view of the (N, 4) state array."""
        view = self._states.view()
        view.flags.writeable = False
        return view

    @property
    def conclusions(self) -> np.ndarray:
        view = self._conclusions.view()
        view.flags.writeable = False
        return view

    def __len__(self) -> int:
        return int(self._states.shape[0])

    def __iter__(self) -> Iterator[State]:
        return (State(*(int(h) for h in row)) for row in self._states)

    def __getitem__(self, state: State) -> Conclusion:
        return Conclusion(int(self._conclusions[self._index(state)]))

    def __contains__(self, state: object) -> bool:
        if not isinstance(state, State):
            return False
        return in_bounds(tuple(state), self._bounds)

    def _index(self, state: State) -> int:
        if not isinstance(state, State):
            raise KeyError(state)
        return encode_index(tuple(state), self._bounds)

    def _select(self, mask: np.ndarray) -> List[State]:
        return [State(*(int(h) for h in row)) for row in self._states[mask]]

    def copy(self) -> "GameStateSpace":
        other = object.__new__(GameStateSpace)
        other._bounds = self._bounds
        other._states = self._states
        other._conclusions = self._conclusions.copy()
        return other

    def mark(self, state: State, conclusion: Conclusion) -> None:
        self._conclusions[self._index(state)] = Conclusion(conclusion)

    def is_losing(self, state: State) -> bool:
        return self[state] == Conclusion.LOSING

    def is_winning(self, state: State) -> bool:
        return self[state] == Conclusion.WINNING

    def children_of(self, parent: State) -> List[State]:
        row = self._states[self._index(parent)]
        delta = self._states - row
        mask = ((delta < 0).sum(axis=1) == 1) & ((delta == 0).sum(axis=1) == delta.shape[1] - 1)
        return self._select(mask)

    def parents_of(self, child: State) -> List[State]:
        row = self._states[self._index(child)]
        delta = self._states - row
        mask = ((delta > 0).sum(axis=1) == 1) & ((delta == 0).sum(axis=1) == delta.shape[1] - 1)
        return self._select(mask)

    def unsolved_states(self) -> List[State]:
        return self._select(self._conclusions == Conclusion.UNKNOWN)

    def winning_states(self) -> List[State]:
        return self._select(self._conclusions == Conclusion.WINNING)

    def losing_states(self) -> List[State]:
        return self._select(self._conclusions == Conclusion.LOSING)

    def is_solved(self) -> bool:
        return not bool(np.any(self._conclusions == Conclusion.UNKNOWN))

    def counts(self) -> Dict[Conclusion, int]:
        values = np.bincount(self._conclusions.astype(np.int64), minlength=len(Conclusion))
        return {c: int(values[c]) for c in Conclusion}

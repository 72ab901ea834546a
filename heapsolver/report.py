from __future__ import annotations

import json
from pathlib import Path
from typing import Any, List, Optional

from .common import State
from .config import DEFAULT_JSON_INDENT
from .space import GameStateSpace


def format_line(state: State, space: GameStateSpace) -> str:
    return f"{state}: {space[state]!s} (parity {state.parity()})"


def format_table(space: GameStateSpace) -> List[str]:
    return [format_line(state, space) for state in space]


def print_table(space: GameStateSpace) -> None:
    for line in format_table(space):
        print(line)
    print()


def print_round(round_no: int, space: GameStateSpace) -> None:
    counts = space.counts()
    summary = ", ".join(f"{c!s}={n}" for c, n in counts.items())
    print(f"Round {round_no} ({summary})")
    print_table(space)


def table_to_dict(space: GameStateSpace, rounds: Optional[int] = None) -> dict[str, Any]:
    return {
        "bounds": list(space.bounds),
        "rounds": rounds,
        "counts": {str(c): n for c, n in space.counts().items()},
        "states": [
            {
                "heaps": list(state),
                "conclusion": str(conclusion),
                "parity": state.parity(),
            }
            for state, conclusion in space.items()
        ],
    }


def write_json(space: GameStateSpace, path: Path, rounds: Optional[int] = None) -> Path:
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", encoding="utf-8") as f:
        json.dump(table_to_dict(space, rounds), f, indent=DEFAULT_JSON_INDENT)
    return path

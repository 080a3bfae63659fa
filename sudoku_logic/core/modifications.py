"""Board modifications proposed by strategies and applied by the logical solver."""

from __future__ import annotations
from dataclasses import dataclass
from typing import Dict, FrozenSet, Iterable, List, Set, Tuple, Union

from .cells import UnsolvedCell


@dataclass(frozen=True)
class SetValue:
    """Place ``value`` in the cell at (row, column)."""
    row: int
    column: int
    value: int

    @classmethod
    def of(cls, cell: UnsolvedCell, value: int) -> SetValue:
        return cls(cell.row, cell.column, value)

    def __str__(self) -> str:
        return f"[{self.row}, {self.column}] = {self.value}"


@dataclass(frozen=True)
class RemoveCandidates:
    """Remove a non-empty set of candidates from the cell at (row, column)."""
    row: int
    column: int
    candidates: FrozenSet[int]

    def __post_init__(self):
        candidates = frozenset(self.candidates)
        if not candidates:
            raise ValueError("candidates must not be empty.")
        object.__setattr__(self, "candidates", candidates)

    @classmethod
    def of(cls, cell: UnsolvedCell, *candidates: int) -> RemoveCandidates:
        return cls(cell.row, cell.column, frozenset(candidates))

    def __str__(self) -> str:
        removed = ", ".join(str(candidate) for candidate in sorted(self.candidates))
        return f"[{self.row}, {self.column}] - {{{removed}}}"


BoardModification = Union[SetValue, RemoveCandidates]


def _position(modification: BoardModification) -> Tuple[int, int]:
    return modification.row, modification.column


class Removals:
    """
    Collects candidates to remove and merges them into one
    :class:`RemoveCandidates` per cell.
    """

    def __init__(self):
        self._removals: Dict[Tuple[int, int], Set[int]] = {}

    def add(self, cell: UnsolvedCell, *candidates: int) -> None:
        if not candidates:
            return
        self._removals.setdefault((cell.row, cell.column), set()).update(candidates)

    def add_all(self, cell: UnsolvedCell, candidates: Iterable[int]) -> None:
        self.add(cell, *candidates)

    def to_list(self) -> List[RemoveCandidates]:
        """Merged removals ordered by row, then column."""
        return [
            RemoveCandidates(row, column, frozenset(candidates))
            for (row, column), candidates in sorted(self._removals.items())
            if candidates
        ]


def unique_set_values(modifications: Iterable[SetValue]) -> List[SetValue]:
    """Drop repeated placements and order the rest by row, then column."""
    return sorted(set(modifications), key=_position)

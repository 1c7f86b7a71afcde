"""State shared between the screens of the interface."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator, Tuple

from .function import Function, FunctionDefinition


@dataclass
class SharedState:
    """The parsed functions known so far and how many files are expected."""

    parsed_files_snapshot: Tuple[Function, ...] = ()
    total_files_to_parse: int = 0

    def update_snapshot(self, functions: Iterable[Function]) -> bool:
        """Take a sorted, duplicate-free snapshot when the count has changed.

        Returns whether the snapshot was replaced.
        """
        functions = list(functions)
        if len(functions) == len(self.parsed_files_snapshot):
            return False
        self.parsed_files_snapshot = tuple(sorted(set(functions)))
        return True

    def definitions(self) -> Iterator[FunctionDefinition]:
        """The function definitions of the snapshot, aliases left out."""
        return (
            function
            for function in self.parsed_files_snapshot
            if isinstance(function, FunctionDefinition)
        )
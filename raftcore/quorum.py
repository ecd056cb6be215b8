"""Basic quorum types: vote outcomes and acknowledged log indexes."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Mapping

U64_MAX = 2**64 - 1

AckIndexer = Mapping[int, "Index"]


def majority(total: int) -> int:
    """Return the number of votes that form a majority of ``total``."""
    return total // 2 + 1


class VoteResult(enum.Enum):
    """The outcome of a vote."""

    PENDING = "VotePending"
    LOST = "VoteLost"
    WON = "VoteWon"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Index:
    """A Raft log position, optionally tagged with a commit group."""

    index: int = 0
    group_id: int = 0

    def __str__(self) -> str:
        shown = "∞" if self.index == U64_MAX else str(self.index)
        if self.group_id == 0:
            return shown
        return f"[{self.group_id}]{shown}"

    def __repr__(self) -> str:
        return str(self)
"""Joint quorums: two majority configurations that must both agree."""

from __future__ import annotations

from typing import Callable, FrozenSet, Iterable, Mapping, Optional, Tuple

from .majority import MajorityConfig
from .quorum import Index, VoteResult


class JointConfig:
    """Two (possibly overlapping) majority configurations.

    Decisions require the support of both majorities. An empty outgoing
    half behaves as if it agreed with everything, so a joint configuration
    with no outgoing voters acts like its incoming majority alone.
    """

    __slots__ = ("incoming", "outgoing")

    def __init__(self, voters: Iterable[int] = ()) -> None:
        self.incoming = MajorityConfig(voters)
        self.outgoing = MajorityConfig()

    @classmethod
    def from_majorities(
        cls, incoming: MajorityConfig, outgoing: MajorityConfig
    ) -> "JointConfig":
        """Build a joint configuration from two existing majorities."""
        config = cls()
        config.incoming = MajorityConfig(incoming)
        config.outgoing = MajorityConfig(outgoing)
        return config

    def committed_index(
        self, use_group_commit: bool, acked: Mapping[int, Index]
    ) -> Tuple[int, bool]:
        """Return the largest index committed in both majorities.

        The flag is true only when both halves used group commit.
        """
        i_idx, i_gc = self.incoming.committed_index(use_group_commit, acked)
        o_idx, o_gc = self.outgoing.committed_index(use_group_commit, acked)
        return min(i_idx, o_idx), i_gc and o_gc

    def vote_result(self, check: Callable[[int], Optional[bool]]) -> VoteResult:
        """Combine the votes of both majorities into one result."""
        incoming = self.incoming.vote_result(check)
        outgoing = self.outgoing.vote_result(check)
        if incoming is VoteResult.WON and outgoing is VoteResult.WON:
            return VoteResult.WON
        if VoteResult.LOST in (incoming, outgoing):
            return VoteResult.LOST
        return VoteResult.PENDING

    def clear(self) -> None:
        """Remove all voters from both halves."""
        self.incoming.clear()
        self.outgoing.clear()

    def is_singleton(self) -> bool:
        """Return true if exactly one voter exists and nothing is outgoing."""
        return len(self.outgoing) == 0 and len(self.incoming) == 1

    def ids(self) -> FrozenSet[int]:
        """Return every voter of either half."""
        return frozenset(self.incoming) | frozenset(self.outgoing)

    def describe(self, acked: Mapping[int, Index]) -> str:
        """Render the commit indexes of all voters as a progress chart."""
        return MajorityConfig(self.ids()).describe(acked)

    def __contains__(self, voter_id: object) -> bool:
        return voter_id in self.incoming or voter_id in self.outgoing

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, JointConfig):
            return NotImplemented
        return self.incoming == other.incoming and self.outgoing == other.outgoing

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"JointConfig(incoming={self.incoming}, outgoing={self.outgoing})"
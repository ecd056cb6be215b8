"""A set of voters deciding by simple majority."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Iterable, Iterator, List, Mapping, Optional, Tuple

from .quorum import U64_MAX, Index, VoteResult, majority


class MajorityConfig:
    """A set of IDs that uses majority quorums to make decisions."""

    __slots__ = ("_voters",)

    def __init__(self, voters: Iterable[int] = ()) -> None:
        self._voters: set[int] = set(voters)

    def ids(self) -> Iterator[int]:
        """Iterate over the voter IDs."""
        return iter(self._voters)

    def slice(self) -> List[int]:
        """Return the voters as a sorted list."""
        return sorted(self._voters)

    def raw_slice(self) -> List[int]:
        """Return the voters as an unsorted list."""
        return list(self._voters)

    def committed_index(
        self, use_group_commit: bool, acked: Mapping[int, Index]
    ) -> Tuple[int, bool]:
        """Compute the committed index from the acknowledged indexes.

        The flag tells whether the group commit algorithm produced the result.
        """
        if not self._voters:
            # An empty half of a joint quorum defers to the other half.
            return U64_MAX, True

        matched = [acked.get(v, Index()) for v in self._voters]
        matched.sort(key=lambda m: m.index, reverse=True)

        quorum_index = matched[majority(len(matched)) - 1]
        if not use_group_commit:
            return quorum_index.index, False

        quorum_commit_index = quorum_index.index
        checked_group_id = quorum_index.group_id
        single_group = True
        for m in matched:
            if m.group_id == 0:
                single_group = False
                continue
            if checked_group_id == 0:
                checked_group_id = m.group_id
                continue
            if checked_group_id == m.group_id:
                continue
            return min(m.index, quorum_commit_index), True
        if single_group:
            return quorum_commit_index, False
        return matched[-1].index, False

    def vote_result(self, check: Callable[[int], Optional[bool]]) -> VoteResult:
        """Tally yes/no/missing votes into a :class:`VoteResult`."""
        if not self._voters:
            # By convention an election on an empty config is won.
            return VoteResult.WON

        yes = missing = 0
        for voter in self._voters:
            vote = check(voter)
            if vote is True:
                yes += 1
            elif vote is None:
                missing += 1
        quorum = majority(len(self._voters))
        if yes >= quorum:
            return VoteResult.WON
        if yes + missing >= quorum:
            return VoteResult.PENDING
        return VoteResult.LOST

    def describe(self, acked: Mapping[int, Index]) -> str:
        """Render the commit indexes as a multi-line progress chart."""
        n = len(self._voters)
        if n == 0:
            return "<empty majority quorum>"

        @dataclass
        class _Row:
            id: int
            idx: Optional[Index]
            bar: int = 0

            @property
            def value(self) -> int:
                return self.idx.index if self.idx is not None else 0

        rows = sorted(
            (_Row(v, acked.get(v)) for v in self._voters),
            key=lambda r: (r.value, r.id),
        )
        for position, (prev, row) in enumerate(zip(rows, rows[1:]), start=1):
            if prev.value < row.value:
                row.bar = position
        rows.sort(key=lambda r: r.id)

        lines = [" " * n + "    idx\n"]
        for row in rows:
            if row.idx is not None:
                prefix = "x" * row.bar + ">" + " " * (n - row.bar)
                shown = str(row.idx)
            else:
                prefix = "?" + " " * n
                shown = str(Index())
            lines.append(f"{prefix} {shown:>5}    (id={row.id})\n")
        return "".join(lines)

    def add(self, voter_id: int) -> None:
        """Add a voter."""
        self._voters.add(voter_id)

    def discard(self, voter_id: int) -> None:
        """Remove a voter if present."""
        self._voters.discard(voter_id)

    def clear(self) -> None:
        """Remove all voters."""
        self._voters.clear()

    def __contains__(self, voter_id: object) -> bool:
        return voter_id in self._voters

    def __len__(self) -> int:
        return len(self._voters)

    def __iter__(self) -> Iterator[int]:
        return iter(self._voters)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, MajorityConfig):
            return NotImplemented
        return self._voters == other._voters

    __hash__ = None  # type: ignore[assignment]

    def __str__(self) -> str:
        return "(" + " ".join(str(v) for v in sorted(self._voters)) + ")"

    def __repr__(self) -> str:
        return f"MajorityConfig({sorted(self._voters)!r})"
"""Log entries and snapshot state not yet written to storage."""

from __future__ import annotations

from typing import List, Optional, Sequence

from .entry import Entry, Snapshot
from .logger import LoggerLike, default_logger, fatal


class Unstable:
    """Unstable log entries and snapshot not yet persisted.

    ``entries[i]`` has log position ``i + offset``. The offset may be below
    the highest position in storage, in which case the next write to
    storage may need to truncate before persisting these entries.
    """

    def __init__(self, offset: int, logger: Optional[LoggerLike] = None) -> None:
        self.snapshot: Optional[Snapshot] = None
        self.entries: List[Entry] = []
        self.entries_size = 0
        self.offset = offset
        self.logger = logger if logger is not None else default_logger()

    def maybe_first_index(self) -> Optional[int]:
        """Return the first possible entry index if a snapshot is held."""
        if self.snapshot is None:
            return None
        return self.snapshot.metadata.index + 1

    def maybe_last_index(self) -> Optional[int]:
        """Return the last index if there is an entry or a snapshot."""
        if self.entries:
            return self.offset + len(self.entries) - 1
        if self.snapshot is not None:
            return self.snapshot.metadata.index
        return None

    def maybe_term(self, idx: int) -> Optional[int]:
        """Return the term of the entry at ``idx``, if known."""
        if idx < self.offset:
            if self.snapshot is None:
                return None
            meta = self.snapshot.metadata
            return meta.term if idx == meta.index else None
        last = self.maybe_last_index()
        if last is None or idx > last:
            return None
        return self.entries[idx - self.offset].term

    def stable_entries(self, index: int, term: int) -> None:
        """Drop the unstable entries once persisted up to ``index``/``term``."""
        if self.snapshot is not None:
            fatal(self.logger, "the unstable snapshot must be stabled before entries")
        if not self.entries:
            fatal(
                self.logger,
                f"unstable.slice is empty, expect its last one's index and term "
                f"are {index} and {term}",
            )
        last = self.entries[-1]
        if last.index != index or last.term != term:
            fatal(
                self.logger,
                f"the last one of unstable.slice has different index {last.index} "
                f"and term {last.term}, expect {index} {term}",
            )
        self.offset = last.index + 1
        self.entries.clear()
        self.entries_size = 0

    def stable_snap(self, index: int) -> None:
        """Drop the unstable snapshot once persisted at ``index``."""
        if self.snapshot is None:
            fatal(
                self.logger,
                f"unstable.snap is none, expect a snapshot with index {index}",
            )
        if self.snapshot.metadata.index != index:
            fatal(
                self.logger,
                f"unstable.snap has different index {self.snapshot.metadata.index}, "
                f"expect {index}",
            )
        self.snapshot = None

    def restore(self, snap: Snapshot) -> None:
        """Replace the contents with ``snap`` without unpacking it."""
        self.entries.clear()
        self.entries_size = 0
        self.offset = snap.metadata.index + 1
        self.snapshot = snap

    def truncate_and_append(self, ents: Sequence[Entry]) -> None:
        """Append ``ents``, truncating overlapping local entries first."""
        if not ents:
            fatal(self.logger, "cannot truncate and append an empty entry list")
        after = ents[0].index
        if after == self.offset + len(self.entries):
            pass
        elif after <= self.offset:
            self.offset = after
            self.entries.clear()
            self.entries_size = 0
        else:
            self.must_check_outofbounds(self.offset, after)
            keep = after - self.offset
            self.entries_size -= sum(e.approximate_size() for e in self.entries[keep:])
            del self.entries[keep:]
        self.entries.extend(ents)
        self.entries_size += sum(e.approximate_size() for e in ents)

    def slice(self, lo: int, hi: int) -> List[Entry]:
        """Return the entries with indexes in ``[lo, hi)``."""
        self.must_check_outofbounds(lo, hi)
        return self.entries[lo - self.offset : hi - self.offset]

    def must_check_outofbounds(self, lo: int, hi: int) -> None:
        """Raise if ``[lo, hi)`` is inverted or outside the held entries."""
        if lo > hi:
            fatal(self.logger, f"invalid unstable.slice {lo} > {hi}")
        upper = self.offset + len(self.entries)
        if lo < self.offset or hi > upper:
            fatal(
                self.logger,
                f"unstable.slice[{lo}, {hi}] out of bound[{self.offset}, {upper}]",
            )
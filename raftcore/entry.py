"""Log entries and snapshots as held by the Raft log."""

from __future__ import annotations

from dataclasses import dataclass, field

# Fixed per-entry overhead counted on top of the payload bytes.
_ENTRY_OVERHEAD = 12


@dataclass
class Entry:
    """A single Raft log entry."""

    index: int = 0
    term: int = 0
    entry_type: int = 0
    data: bytes = b""
    context: bytes = b""

    def approximate_size(self) -> int:
        """Return an estimate of the entry's size in bytes."""
        return len(self.data) + len(self.context) + _ENTRY_OVERHEAD


@dataclass
class SnapshotMetadata:
    """The log position a snapshot was taken at."""

    index: int = 0
    term: int = 0


@dataclass
class Snapshot:
    """A snapshot of the state machine with its metadata."""

    data: bytes = b""
    metadata: SnapshotMetadata = field(default_factory=SnapshotMetadata)

    def is_empty(self) -> bool:
        """Return true if the snapshot carries no log position."""
        return self.metadata.index == 0
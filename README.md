# raftcore

Building blocks of the Raft consensus algorithm, in pure Python with no
runtime dependencies:

- majority and joint quorum configurations that compute committed indexes
  and election outcomes;
- the unstable part of the Raft log: entries and a pending snapshot that
  have not yet reached stable storage.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Quorums

`raftcore.quorum` holds the shared types: `VoteResult` (`PENDING`, `LOST`,
`WON`, printed as `VotePending`, `VoteLost`, `VoteWon`), `Index` (a log
position with an optional commit `group_id`) and `majority(n)`, the number
of votes that make a majority of `n` voters.

`MajorityConfig` in `raftcore.majority` is a set of voter ids that decides
by simple majority. `committed_index` takes a mapping from voter id to the
highest `Index` that voter has acknowledged and returns the index a
majority has reached, together with a flag telling whether the group
commit algorithm produced the result. An empty configuration returns
`2**64 - 1` and wins every vote, so that it never holds back a joint
quorum.

```python
from raftcore.majority import MajorityConfig
from raftcore.quorum import Index, VoteResult

config = MajorityConfig({1, 2, 3})
acked = {1: Index(index=5), 2: Index(index=3), 3: Index(index=1)}
index, _ = config.committed_index(False, acked)
assert index == 3

votes = {1: True, 2: False}
assert config.vote_result(votes.get) == VoteResult.PENDING
```

`vote_result` takes any callable mapping a voter id to `True`, `False` or
`None` (no vote yet). `describe` renders the acknowledged indexes as a
small text chart, one line per voter.

`JointConfig` in `raftcore.joint` combines an `incoming` and an `outgoing`
majority, as used during a membership change. A decision needs both
halves; losing in either half loses the vote.

```python
from raftcore.joint import JointConfig
from raftcore.majority import MajorityConfig

joint = JointConfig.from_majorities(MajorityConfig({1, 2, 3}), MajorityConfig({3, 4, 5}))
assert 4 in joint
assert joint.ids() == frozenset({1, 2, 3, 4, 5})
assert not joint.is_singleton()
```

## The unstable log

`raftcore.entry` defines `Entry` (index, term, entry type, data, context),
`SnapshotMetadata` and `Snapshot`. `Entry.approximate_size()` estimates an
entry's size as its payload bytes plus a fixed overhead.

`Unstable` in `raftcore.log_unstable` holds log entries and an incoming
snapshot that have not been persisted yet. Entry `i` sits at log position
`offset + i`, and `entries_size` tracks the summed approximate size.

```python
from raftcore.entry import Entry
from raftcore.log_unstable import Unstable
from raftcore.logger import default_logger

log = Unstable(5, default_logger())
log.truncate_and_append([Entry(index=5, term=1), Entry(index=6, term=1)])
assert log.maybe_last_index() == 6
assert log.maybe_term(5) == 1

log.stable_entries(6, 1)
assert log.offset == 7
```

## Errors and logging

A broken invariant, such as slicing outside the stored range or
stabilising entries or a snapshot that do not match, raises `RaftPanic`
from `raftcore.logger`. `fatal(logger, message)` raises it with the
logger's context appended. `default_logger()` returns a `LoggerAdapter`
over the `raftcore` logger, tagged with a `case` taken from the current
thread's name.

## What this package does not do

There is no Raft node here: no elections, message handling, log
replication, stable storage or networking. The package supplies only the
quorum arithmetic and the in-memory unstable log that such a node would
be built on.
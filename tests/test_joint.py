import pytest

from raftcore.joint import JointConfig
from raftcore.majority import MajorityConfig
from raftcore.quorum import U64_MAX, Index, VoteResult


def _joint(incoming, outgoing):
    return JointConfig.from_majorities(
        MajorityConfig(incoming), MajorityConfig(outgoing)
    )


def _acked(pairs):
    return {voter: Index(index) for voter, index in pairs.items()}


def _grouped(triples):
    return {voter: Index(index, gid) for voter, (index, gid) in triples.items()}


def test_new_puts_voters_in_incoming():
    config = JointConfig([1, 2, 3])
    assert sorted(config.incoming) == [1, 2, 3]
    assert len(config.outgoing) == 0


def test_empty_joint_commits_everything():
    assert JointConfig().committed_index(False, {}) == (U64_MAX, True)


@pytest.mark.parametrize(
    "incoming, outgoing, acked, expected",
    [
        ([1], [], {}, 0),
        ([1], [1], {1: 12}, 12),
        ([1], [2], {1: 10, 2: 5}, 5),
        ([1], [2], {1: 5, 2: 10}, 5),
        ([1, 2, 3], [], {1: 5, 2: 6, 3: 7}, 6),
        ([1, 2, 3], [3, 4, 5], {1: 5, 2: 6, 3: 7, 4: 3, 5: 4}, 4),
        ([1, 2, 3], [4, 5, 6], {1: 10, 2: 11, 3: 12}, 0),
    ],
)
def test_committed_index(incoming, outgoing, acked, expected):
    acked = _acked(acked)
    idx, _ = _joint(incoming, outgoing).committed_index(False, acked)
    assert idx == expected
    swapped, _ = _joint(outgoing, incoming).committed_index(False, acked)
    assert swapped == idx


def test_committed_index_matches_majority_with_zero_or_self_joint():
    majority = MajorityConfig([1, 2, 3, 4, 5])
    acked = _acked({1: 100, 2: 101, 3: 99, 4: 50})
    expected = majority.committed_index(False, acked)
    assert expected[0] == 99
    zero = JointConfig.from_majorities(majority, MajorityConfig())
    same = JointConfig.from_majorities(majority, majority)
    assert zero.committed_index(False, acked)[0] == expected[0]
    assert same.committed_index(False, acked)[0] == expected[0]


@pytest.mark.parametrize(
    "acked, expected",
    [
        ({1: (10, 1), 2: (20, 1), 3: (30, 2)}, (20, True)),
        ({1: (10, 1), 2: (20, 1), 3: (30, 1)}, (20, False)),
        ({1: (10, 0), 2: (20, 1), 3: (30, 1)}, (10, False)),
    ],
)
def test_group_committed(acked, expected):
    acked = _grouped(acked)
    config = _joint([1, 2, 3], [1, 2, 3])
    assert config.committed_index(True, acked) == expected


def test_group_commit_flag_requires_both_halves():
    acked = _grouped({1: (10, 1), 2: (20, 1), 3: (30, 2), 4: (40, 1)})
    config = _joint([1, 2, 3], [4])
    assert config.committed_index(True, acked) == (20, False)


@pytest.mark.parametrize(
    "incoming, outgoing, votes, expected",
    [
        ([1], [], {}, VoteResult.PENDING),
        ([1], [], {1: True}, VoteResult.WON),
        ([1], [], {1: False}, VoteResult.LOST),
        ([1], [2], {1: True, 2: True}, VoteResult.WON),
        ([1], [2], {1: True}, VoteResult.PENDING),
        ([1], [2], {1: True, 2: False}, VoteResult.LOST),
        ([1], [2], {1: False}, VoteResult.LOST),
        ([1, 2, 3], [3, 4, 5], {1: True, 2: True, 3: True}, VoteResult.PENDING),
        ([1, 2, 3], [3, 4, 5], {1: True, 3: True, 4: True}, VoteResult.WON),
        ([1, 2, 3], [3, 4, 5], {4: False, 5: False}, VoteResult.LOST),
        ([], [], {}, VoteResult.WON),
    ],
)
def test_vote_result(incoming, outgoing, votes, expected):
    result = _joint(incoming, outgoing).vote_result(votes.get)
    assert result is expected
    assert _joint(outgoing, incoming).vote_result(votes.get) is result


def test_is_singleton():
    assert JointConfig([1]).is_singleton() is True
    assert JointConfig([1, 2]).is_singleton() is False
    assert JointConfig().is_singleton() is False
    assert _joint([1], [1]).is_singleton() is False


def test_ids_and_contains():
    config = _joint([1, 2], [2, 3])
    assert sorted(config.ids()) == [1, 2, 3]
    assert len(config.ids()) == 3
    assert 3 in config
    assert 1 in config
    assert 4 not in config


def test_clear_removes_all_voters():
    config = _joint([1, 2], [3])
    config.clear()
    assert len(config.ids()) == 0
    assert 1 not in config
    assert config == JointConfig()


def test_from_majorities_copies_inputs():
    incoming = MajorityConfig([1])
    config = JointConfig.from_majorities(incoming, MajorityConfig([2]))
    incoming.add(9)
    assert 9 not in config


def test_describe_pinned():
    acked = _acked({1: 10, 2: 5})
    text = _joint([1], [2]).describe(acked)
    expected = (
        "      idx\n"
        "x>     10    (id=1)\n"
        ">       5    (id=2)\n"
    )
    assert text == expected
    assert text == MajorityConfig([1, 2]).describe(acked)


def test_describe_empty():
    assert JointConfig().describe({}) == "<empty majority quorum>"


def test_equality():
    assert _joint([1, 2], [3]) == _joint([2, 1], [3])
    assert _joint([1, 2], [3]) != _joint([3], [1, 2])
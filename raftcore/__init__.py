"""Raft consensus building blocks: quorum configurations and the unstable log."""

__version__ = "0.7.0"
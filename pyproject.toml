[build-system]
requires = ["setuptools>=61"]
build-backend = "setuptools.build_meta"

[project]
name = "raftcore"
version = "0.7.0"
description = "Core building blocks of the Raft consensus algorithm: quorums, joint configurations and the unstable log."
requires-python = ">=3.10"
dependencies = []
keywords = ["raft", "consensus", "distributed-systems", "quorum", "replication"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Distributed Computing",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.setuptools.packages.find]
include = ["raftcore*"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

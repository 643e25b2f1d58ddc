"""Test fixtures for pytest."""

from copy import deepcopy
from typing import Any, Dict, Generator
from unittest.mock import MagicMock

import pytest

from lib.data_types import Config, PullRequest
from lib.utilities import PullRequestClient

REVIEWERS = ["alice", "bob", "carol", "dave"]

REVIEW_GROUPS = {
    "backend": ["alice", "bob", "carol"],
    "frontend": ["dave", "erin"],
}

CONFIG_DATA: Dict[str, Any] = {
    "addReviewers": True,
    "addAssignees": False,
    "numberOfReviewers": 2,
    "reviewers": REVIEWERS,
    "useReviewGroups": False,
    "reviewGroups": REVIEW_GROUPS,
    "skipKeywords": ["wip"],
}

EVENT = {
    "action": "opened",
    "pull_request": {
        "number": 7,
        "title": "Add login page",
        "draft": False,
        "user": {"login": "alice"},
        "labels": [{"name": "frontend"}],
    },
}


@pytest.fixture(scope="function")
def pr() -> PullRequest:
    """Pull request #7 opened by alice."""
    return PullRequest(number=7, author="alice", title="Add login page")


@pytest.fixture(scope="function")
def config() -> Config:
    """Flat reviewer configuration picking 2 of REVIEWERS."""
    return Config(
        add_reviewers=True,
        reviewers=list(REVIEWERS),
        number_of_reviewers=2,
    )


@pytest.fixture(scope="function")
def config_data() -> Generator[Dict[str, Any], None, None]:
    """Provide a fresh copy of the raw YAML mapping."""
    yield deepcopy(CONFIG_DATA)


@pytest.fixture(scope="function")
def mocked_pr_client() -> MagicMock:
    """Submission sink that records calls instead of hitting GitHub."""
    return MagicMock(spec=PullRequestClient)

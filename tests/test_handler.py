"""Tests for the pull request handler"""

from unittest.mock import MagicMock

import pytest

from lib.data_types import Config, FilterLabels, PullRequest
from lib.env_constants import SkipReasons
from lib.handler import get_skip_reason, handle_pull_request


class TestGetSkipReason:
    """Test the rules that leave a pull request untouched"""

    def test_nothing_to_skip(self, config: Config, pr: PullRequest) -> None:
        assert get_skip_reason(pr, config) is None

    def test_skip_keyword_in_title(self, config: Config) -> None:
        config.skip_keywords = ["wip"]
        pr = PullRequest(7, "alice", title="[WIP] Add login page")

        assert get_skip_reason(pr, config) == SkipReasons.SKIP_KEYWORDS

    @pytest.mark.parametrize(
        "run_on_draft,expected",
        [(False, SkipReasons.DRAFT), (True, None)],
        ids=["Draft skipped", "Draft processed"],
    )
    def test_draft(self, config: Config, run_on_draft: bool, expected) -> None:
        config.run_on_draft = run_on_draft
        pr = PullRequest(7, "alice", draft=True)

        assert get_skip_reason(pr, config) == expected

    @pytest.mark.parametrize(
        "filter_labels,labels,expected",
        [
            (FilterLabels(include=["ready"]), [], SkipReasons.FILTER_LABELS),
            (FilterLabels(include=["ready"]), ["bug", "ready"], None),
            (FilterLabels(exclude=["no-review"]), ["no-review"], SkipReasons.FILTER_LABELS),
            (FilterLabels(exclude=["no-review"]), ["bug"], None),
            (
                FilterLabels(include=["ready"], exclude=["no-review"]),
                ["ready", "no-review"],
                SkipReasons.FILTER_LABELS,
            ),
        ],
        ids=[
            "Missing included label",
            "Has included label",
            "Has excluded label",
            "No excluded label",
            "Exclude wins over include",
        ],
    )
    def test_filter_labels(
        self, config: Config, filter_labels: FilterLabels, labels, expected
    ) -> None:
        config.filter_labels = filter_labels
        pr = PullRequest(7, "alice", labels=labels)

        assert get_skip_reason(pr, config) == expected


class TestHandlePullRequest:
    """Test a whole assignment pass with a mocked submission sink"""

    def test_adds_reviewers(
        self, config: Config, pr: PullRequest, mocked_pr_client: MagicMock
    ) -> None:
        result = handle_pull_request(pr, config, mocked_pr_client)

        assert result.reviewers == ["carol", "dave"]
        assert result.assignees == []
        assert result.skipped_reason is None
        mocked_pr_client.add_reviewers.assert_called_once_with(["carol", "dave"])
        mocked_pr_client.add_assignees.assert_not_called()

    def test_skipped_pr_is_untouched(
        self, config: Config, mocked_pr_client: MagicMock
    ) -> None:
        config.skip_keywords = ["wip"]
        pr = PullRequest(7, "alice", title="wip: login")

        result = handle_pull_request(pr, config, mocked_pr_client)

        assert result.skipped_reason == SkipReasons.SKIP_KEYWORDS.value
        mocked_pr_client.add_reviewers.assert_not_called()
        mocked_pr_client.add_assignees.assert_not_called()

    def test_assigns_author(
        self, config: Config, pr: PullRequest, mocked_pr_client: MagicMock
    ) -> None:
        config.add_assignees = True

        result = handle_pull_request(pr, config, mocked_pr_client)

        assert result.assignees == ["alice"]
        mocked_pr_client.add_assignees.assert_called_once_with(["alice"])

    def test_assignees_reuse_reviewers(
        self, config: Config, pr: PullRequest, mocked_pr_client: MagicMock
    ) -> None:
        config.add_assignees = "reviewers"

        result = handle_pull_request(pr, config, mocked_pr_client)

        assert result.assignees == result.reviewers == ["carol", "dave"]
        mocked_pr_client.add_assignees.assert_called_once_with(["carol", "dave"])

    def test_reviewers_mode_without_reviewers(
        self, config: Config, pr: PullRequest, mocked_pr_client: MagicMock
    ) -> None:
        config.add_reviewers = False
        config.add_assignees = "reviewers"

        result = handle_pull_request(pr, config, mocked_pr_client)

        assert result.assignees == []
        mocked_pr_client.add_reviewers.assert_not_called()
        mocked_pr_client.add_assignees.assert_not_called()

    def test_nothing_to_choose(
        self, pr: PullRequest, mocked_pr_client: MagicMock
    ) -> None:
        config = Config(add_reviewers=True, reviewers=["alice"])

        result = handle_pull_request(pr, config, mocked_pr_client)

        assert result.reviewers == []
        mocked_pr_client.add_reviewers.assert_not_called()

    def test_review_groups(
        self, pr: PullRequest, mocked_pr_client: MagicMock
    ) -> None:
        config = Config(
            add_reviewers=True,
            number_of_reviewers=1,
            use_review_groups=True,
            review_groups={"backend": ["alice", "bob", "carol"], "qa": ["zoe"]},
        )

        result = handle_pull_request(pr, config, mocked_pr_client)

        assert result.reviewers == ["carol", "zoe"]

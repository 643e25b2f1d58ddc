"""
Pull Request Handler

Runs one assignment pass over a pull request:

1. Skip when the title contains a skip keyword
2. Skip drafts unless runOnDraft is set
3. Skip when filterLabels.include is set and none of its labels is on the
   PR, or when any filterLabels.exclude label is on the PR
4. Request reviewers (addReviewers)
5. Add assignees (addAssignees), reusing the reviewers when it is
   "reviewers"
"""

from typing import List

from lib.data_types import AssignmentResult, Config, PullRequest
from lib.env_constants import AddAssigneesMode, SkipReasons
from lib.planner import choose_assignees, choose_reviewers
from lib.selection import includes_skip_keywords
from lib.utilities import PullRequestClient


def get_skip_reason(pr: PullRequest, config: Config) -> SkipReasons | None:
    if config.skip_keywords and includes_skip_keywords(
        pr.title, config.skip_keywords
    ):
        return SkipReasons.SKIP_KEYWORDS

    if pr.draft and not config.run_on_draft:
        return SkipReasons.DRAFT

    labels = set(pr.labels)
    include = config.filter_labels.include
    if include and not labels.intersection(include):
        return SkipReasons.FILTER_LABELS
    if labels.intersection(config.filter_labels.exclude):
        return SkipReasons.FILTER_LABELS

    return None


def handle_pull_request(
    pr: PullRequest, config: Config, client: PullRequestClient
) -> AssignmentResult:
    """
    Choose reviewers and assignees for pr and submit them through client.

    Returns:
        What was chosen, or the reason the PR was skipped
    """
    print(f"🔄 Processing PR #{pr.number} by {pr.author}: {pr.title}")

    skip_reason = get_skip_reason(pr, config)
    if skip_reason is not None:
        print(f"⏭️  Skipping PR #{pr.number} ({skip_reason.value})")
        return AssignmentResult(skipped_reason=skip_reason.value)

    owner = pr.author
    reviewers: List[str] = []
    assignees: List[str] = []

    if config.add_reviewers:
        reviewers = choose_reviewers(owner, config, pr)
        if reviewers:
            client.add_reviewers(reviewers)
        else:
            print("   No reviewers to add")

    if config.add_assignees:
        if config.add_assignees == AddAssigneesMode.REVIEWERS.value:
            assignees = list(reviewers)
        else:
            assignees = choose_assignees(owner, config, pr)

        if assignees:
            client.add_assignees(assignees)
        else:
            print("   No assignees to add")

    return AssignmentResult(reviewers=reviewers, assignees=assignees)

"""
Reviewer and Assignee Planning

Decides, from the configuration and the pull request, whether to pick from
named groups or from a flat list, and returns the chosen users.

REVIEWERS:
- useReviewGroups with at least one group → numberOfReviewers per group
- otherwise → numberOfReviewers from the flat "reviewers" list

ASSIGNEES (first match wins):
1. addAssignees is true or "author" → the PR author
2. addAssignees is "reviewers" → must not get here (the chosen reviewers
   are reused by the caller instead)
3. useAssigneeGroups with at least one group → per group
4. otherwise → flat "assignees" list, or "reviewers" if not configured

numberOfAssignees falls back to numberOfReviewers when it is unset or 0.
The PR author is never picked as reviewer or as a candidate assignee.
"""

from typing import List

from lib.data_types import Config, PullRequest
from lib.env_constants import AddAssigneesMode
from lib.selection import choose_users, choose_users_from_groups


class InvalidStateError(RuntimeError):
    """Raised when planning is reached through an impossible branch"""


def choose_reviewers(owner: str, config: Config, pr: PullRequest) -> List[str]:
    use_groups = config.use_review_groups and len(config.review_groups) > 0

    if use_groups:
        return choose_users_from_groups(
            pr.assign_key(),
            owner,
            config.review_groups,
            config.number_of_reviewers,
        )

    return choose_users(
        pr.assign_key(),
        config.reviewers,
        config.number_of_reviewers,
        owner,
    )


def choose_assignees(owner: str, config: Config, pr: PullRequest) -> List[str]:
    add_assignees = config.add_assignees

    if add_assignees == AddAssigneesMode.REVIEWERS.value:
        raise InvalidStateError(
            "Reached `choose_assignees` when addAssignees is set to "
            "'reviewers'. This should not happen."
        )

    if add_assignees:
        return [owner]

    number_of_assignees = config.number_of_assignees or config.number_of_reviewers
    use_groups = config.use_assignee_groups and len(config.assignee_groups) > 0

    if use_groups:
        return choose_users_from_groups(
            pr.assign_key(),
            owner,
            config.assignee_groups,
            number_of_assignees,
        )

    candidates = (
        config.assignees if config.assignees is not None else config.reviewers
    )
    return choose_users(
        pr.assign_key(),
        candidates,
        number_of_assignees,
        owner,
    )

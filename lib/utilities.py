import json
from contextlib import contextmanager
from typing import Any, Dict, Iterator, List

from github import Auth, Github
from github.GithubException import GithubException
from github.PullRequest import PullRequest as GithubPullRequest


def load_event(event_path: str) -> Dict[str, Any]:
    """Read the JSON event payload written by the Actions runner"""
    if not event_path:
        raise ValueError("GITHUB_EVENT_PATH is not set")
    with open(event_path, encoding="utf-8") as f:
        return json.load(f)


def split_repository(repository: str) -> tuple[str, str]:
    """Split "owner/repo" into its two parts"""
    owner, _, repo = (repository or "").partition("/")
    if not owner or not repo:
        raise ValueError(
            f"Expected repository as 'owner/repo', got: {repository!r}"
        )
    return owner, repo


@contextmanager
def get_github_client(token: str) -> Iterator[Github]:
    """
    Authenticated GitHub client, closed when the block exits.

    Args:
        token: Repository token (GITHUB_TOKEN or a personal access token)
    """
    if not token:
        raise ValueError(
            "A token must be provided via the repo-token input or "
            "the GITHUB_TOKEN environment variable"
        )

    client = Github(auth=Auth.Token(token))
    try:
        yield client
    finally:
        client.close()


class PullRequestClient:
    """
    Writes reviewers and assignees to a pull request.

    API failures (missing permissions, rate limits, users who are not
    collaborators) are reported and do not abort the run.
    """

    def __init__(self, pull: GithubPullRequest):
        self.pull = pull

    def add_reviewers(self, reviewers: List[str]) -> bool:
        try:
            self.pull.create_review_request(reviewers=reviewers)
        except GithubException as e:
            print(f"⚠️  Could not request reviewers {reviewers}: {e}")
            return False

        print(f"✅ Added reviewers to PR #{self.pull.number}: {reviewers}")
        return True

    def add_assignees(self, assignees: List[str]) -> bool:
        try:
            self.pull.as_issue().add_to_assignees(*assignees)
        except GithubException as e:
            print(f"⚠️  Could not add assignees {assignees}: {e}")
            return False

        print(f"✅ Added assignees to PR #{self.pull.number}: {assignees}")
        return True

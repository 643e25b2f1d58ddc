"""
Auto Assign - Pull Request Reviewer/Assignee Assignment

GitHub Action entrypoint, run on pull_request / pull_request_target events.

Reads the configuration file from the repository at the triggering commit,
picks reviewers and assignees deterministically from the PR number, and
submits them to the PR. Re-running the workflow on the same PR picks the
same users.

Inputs (as env, a local .env file is also read):
    INPUT_REPO_TOKEN          Token, falls back to GITHUB_TOKEN
    INPUT_CONFIGURATION_PATH  Config path (default: .github/auto_assign.yml)

Provided by the runner:
    GITHUB_EVENT_PATH   Event payload JSON
    GITHUB_REPOSITORY   owner/repo
    GITHUB_SHA          Commit the configuration is read at
"""

import os
import sys
import traceback
from pathlib import Path

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from lib.config_loader import load_config  # noqa: E402
from lib.data_types import AssignmentResult, PullRequest  # noqa: E402
from lib.env_constants import (  # noqa: E402
    DEFAULT_CONFIGURATION_PATH,
    get_input,
)
from lib.handler import handle_pull_request  # noqa: E402
from lib.utilities import (  # noqa: E402
    PullRequestClient,
    get_github_client,
    load_event,
    split_repository,
)


def main() -> AssignmentResult:
    token = get_input("repo-token") or os.environ.get("GITHUB_TOKEN", "")
    config_path = get_input("configuration-path", DEFAULT_CONFIGURATION_PATH)
    owner, repo = split_repository(os.environ.get("GITHUB_REPOSITORY", ""))
    ref = os.environ.get("GITHUB_SHA") or None

    pr = PullRequest.from_event(load_event(os.environ.get("GITHUB_EVENT_PATH", "")))

    with get_github_client(token) as client:
        config = load_config(client, owner, repo, config_path, ref)
        pull = client.get_repo(f"{owner}/{repo}").get_pull(pr.number)
        return handle_pull_request(pr, config, PullRequestClient(pull))


if __name__ == "__main__":
    try:
        result = main()
        if result.skipped_reason is None:
            print(
                f"\n📊 Reviewers: {result.reviewers or '(none)'}, "
                f"Assignees: {result.assignees or '(none)'}"
            )
    except Exception as exc:  # noqa: BLE001
        print(f"\n❌ Error during auto assign: {exc}")
        traceback.print_exc()
        raise  # Re-raise to ensure workflow fails

import os
from enum import Enum

from dotenv import find_dotenv, load_dotenv

load_dotenv(find_dotenv())

# Some low primes to shuffle the candidate list. One prime is consumed per
# selection slot, so the tuple length is the largest count we can assign.
PRIMES = (1, 503, 521, 541, 599, 733)
MAX_NUMBER_OF_USERS = len(PRIMES)

DEFAULT_CONFIGURATION_PATH = ".github/auto_assign.yml"


def get_input(name: str, default: str = "") -> str:
    """
    Read a workflow input from the environment.

    GitHub Actions exposes inputs as INPUT_<NAME>. Both the dash and the
    underscore spelling of the name are accepted.

    Args:
        name: Input name, e.g. "repo-token" or "CONFIGURATION_PATH"
        default: Value returned when the input is not set

    Returns:
        The stripped input value, or default
    """
    upper = name.upper()
    for key in (
        f"INPUT_{upper}",
        f"INPUT_{upper.replace('-', '_')}",
        f"INPUT_{upper.replace('_', '-')}",
    ):
        value = os.environ.get(key)
        if value is not None and value.strip():
            return value.strip()
    return default


class AddAssigneesMode(str, Enum):
    """String values accepted by the addAssignees setting"""

    AUTHOR = "author"  # Assign the PR back to its author
    REVIEWERS = "reviewers"  # Reuse the chosen reviewers as assignees


class ConfigKeys(str, Enum):
    """Keys of the YAML configuration file"""

    ADD_REVIEWERS = "addReviewers"
    ADD_ASSIGNEES = "addAssignees"
    REVIEWERS = "reviewers"
    ASSIGNEES = "assignees"
    NUMBER_OF_REVIEWERS = "numberOfReviewers"
    NUMBER_OF_ASSIGNEES = "numberOfAssignees"
    USE_REVIEW_GROUPS = "useReviewGroups"
    REVIEW_GROUPS = "reviewGroups"
    USE_ASSIGNEE_GROUPS = "useAssigneeGroups"
    ASSIGNEE_GROUPS = "assigneeGroups"
    SKIP_KEYWORDS = "skipKeywords"
    FILTER_LABELS = "filterLabels"
    RUN_ON_DRAFT = "runOnDraft"


class SkipReasons(str, Enum):
    """Why a pull request was left untouched"""

    SKIP_KEYWORDS = "skip-keywords"
    DRAFT = "draft"
    FILTER_LABELS = "filter-labels"

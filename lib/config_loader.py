"""
Configuration Loader

Loads the auto-assign configuration from a YAML file stored in the
repository itself (default: .github/auto_assign.yml), read at the commit
that triggered the workflow.

Expected format:

    addReviewers: true
    addAssignees: author
    numberOfReviewers: 2
    reviewers:
      - alice
      - bob
    useReviewGroups: false
    reviewGroups:
      backend: [alice, bob]
      frontend: [carol]
    skipKeywords: [wip]
    filterLabels:
      include: []
      exclude: [no-review]

Missing keys fall back to the defaults of lib.data_types.Config. There is
no fallback for a missing file: the run fails.
"""
from typing import Any, Dict, List, Optional

import yaml
from github import Github
from github.GithubException import UnknownObjectException

from lib.data_types import Config, FilterLabels
from lib.env_constants import MAX_NUMBER_OF_USERS, ConfigKeys


class ConfigurationError(ValueError):
    """The configuration file content is unusable"""


class ConfigurationNotFoundError(ConfigurationError):
    """The configuration file does not exist at the requested ref"""


def fetch_configuration_file(
    client: Github,
    owner: str,
    repo: str,
    path: str,
    ref: Optional[str] = None,
) -> Dict[str, Any]:
    """
    Read and parse the YAML configuration file from a repository.

    Args:
        client: Authenticated PyGithub client
        owner: Repository owner
        repo: Repository name
        path: Path of the file inside the repository
        ref: Commit SHA, branch or tag. None reads the default branch.

    Returns:
        The parsed YAML document (None for an empty document)

    Raises:
        ConfigurationNotFoundError: the file or its content is missing
    """
    repository = client.get_repo(f"{owner}/{repo}")

    kwargs = {"ref": ref} if ref else {}
    try:
        contents = repository.get_contents(path, **kwargs)
    except UnknownObjectException as e:
        raise ConfigurationNotFoundError(
            "the configuration file is not found"
        ) from e

    # A directory listing comes back as a list of ContentFile
    if isinstance(contents, list) or not contents.content:
        raise ConfigurationNotFoundError("the configuration file is not found")

    config_string = contents.decoded_content.decode("utf-8")
    return yaml.safe_load(config_string)


def _parse_count(data: Dict[str, Any], key: ConfigKeys) -> Optional[int]:
    value = data.get(key.value)
    if value is None:
        return None

    # bool is an int subclass, "true" is not a count
    if isinstance(value, bool) or not isinstance(value, int):
        raise ConfigurationError(
            f"'{key.value}' must be an integer, got: {value!r}"
        )
    if value < 0:
        raise ConfigurationError(f"'{key.value}' must not be negative")
    if value > MAX_NUMBER_OF_USERS:
        raise ConfigurationError(
            f"'{key.value}' is {value}, at most {MAX_NUMBER_OF_USERS} "
            "users can be assigned"
        )
    return value


def _parse_names(value: Any, key: str) -> List[str]:
    if value is None:
        return []
    # "reviewers: alice" is a string, not a list of one name
    if not isinstance(value, list):
        raise ConfigurationError(
            f"'{key}' must be a list of names, got: {value!r}"
        )
    return [str(name) for name in value]


def _parse_mapping(value: Any, key: str) -> Dict[str, Any]:
    if value is None:
        return {}
    if not isinstance(value, dict):
        raise ConfigurationError(f"'{key}' must be a mapping, got: {value!r}")
    return value


def _parse_groups(
    data: Dict[str, Any], use_key: ConfigKeys, groups_key: ConfigKeys
) -> Dict[str, List[str]]:
    if data.get(use_key.value) and groups_key.value not in data:
        raise ConfigurationError(
            f"Error in configuration file to do with using "
            f"{groups_key.value}. Expected '{groups_key.value}' variable to "
            f"be set because the variable '{use_key.value}' = true."
        )

    groups = _parse_mapping(data.get(groups_key.value), groups_key.value)
    return {
        str(name): _parse_names(members, f"{groups_key.value}.{name}")
        for name, members in groups.items()
    }


def parse_config(data: Optional[Dict[str, Any]]) -> Config:
    """
    Turn the parsed YAML mapping into a validated Config.

    Raises:
        ConfigurationError: on invalid values
    """
    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ConfigurationError(
            "The configuration file must contain a YAML mapping"
        )

    number_of_reviewers = _parse_count(data, ConfigKeys.NUMBER_OF_REVIEWERS)
    number_of_assignees = _parse_count(data, ConfigKeys.NUMBER_OF_ASSIGNEES)
    filter_labels_key = ConfigKeys.FILTER_LABELS.value
    filter_labels = _parse_mapping(data.get(filter_labels_key), filter_labels_key)
    assignees = data.get(ConfigKeys.ASSIGNEES.value)

    return Config(
        add_reviewers=bool(data.get(ConfigKeys.ADD_REVIEWERS.value, False)),
        add_assignees=data.get(ConfigKeys.ADD_ASSIGNEES.value) or False,
        reviewers=_parse_names(
            data.get(ConfigKeys.REVIEWERS.value), ConfigKeys.REVIEWERS.value
        ),
        assignees=None
        if assignees is None
        else _parse_names(assignees, ConfigKeys.ASSIGNEES.value),
        number_of_reviewers=number_of_reviewers or 0,
        number_of_assignees=number_of_assignees or 0,
        use_review_groups=bool(
            data.get(ConfigKeys.USE_REVIEW_GROUPS.value, False)
        ),
        review_groups=_parse_groups(
            data, ConfigKeys.USE_REVIEW_GROUPS, ConfigKeys.REVIEW_GROUPS
        ),
        use_assignee_groups=bool(
            data.get(ConfigKeys.USE_ASSIGNEE_GROUPS.value, False)
        ),
        assignee_groups=_parse_groups(
            data, ConfigKeys.USE_ASSIGNEE_GROUPS, ConfigKeys.ASSIGNEE_GROUPS
        ),
        skip_keywords=_parse_names(
            data.get(ConfigKeys.SKIP_KEYWORDS.value),
            ConfigKeys.SKIP_KEYWORDS.value,
        ),
        filter_labels=FilterLabels(
            include=_parse_names(
                filter_labels.get("include"), f"{filter_labels_key}.include"
            ),
            exclude=_parse_names(
                filter_labels.get("exclude"), f"{filter_labels_key}.exclude"
            ),
        ),
        run_on_draft=bool(data.get(ConfigKeys.RUN_ON_DRAFT.value, False)),
    )


def load_config(
    client: Github,
    owner: str,
    repo: str,
    path: str,
    ref: Optional[str] = None,
) -> Config:
    """Fetch the configuration file and return it as a validated Config"""
    print(f"📄 Loading configuration from {owner}/{repo}:{path} (ref: {ref})")
    config = parse_config(
        fetch_configuration_file(client, owner, repo, path, ref)
    )
    print(
        f"   Config loaded: addReviewers={config.add_reviewers}, "
        f"addAssignees={config.add_assignees}, "
        f"numberOfReviewers={config.number_of_reviewers}"
    )
    return config

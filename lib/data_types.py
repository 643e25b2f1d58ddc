"""Data type definitions for the reviewer/assignee assignment system."""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Union


@dataclass
class FilterLabels:
    """
    Label rules deciding whether a pull request is processed.

    Attributes:
        include: PR must carry at least one of these (ignored when empty)
        exclude: PR is skipped if it carries any of these
    """

    include: List[str] = field(default_factory=list)
    exclude: List[str] = field(default_factory=list)


@dataclass
class Config:
    """
    Parsed auto-assign configuration.

    Attributes:
        add_reviewers: Whether to request reviews at all
        add_assignees: True/False, "author", or "reviewers"
        reviewers: Flat reviewer candidate list
        assignees: Flat assignee candidate list (None when not configured)
        number_of_reviewers: How many reviewers to pick (0 = everyone)
        number_of_assignees: How many assignees to pick (0 = use
            number_of_reviewers)
        use_review_groups: Pick reviewers per group instead of flat list
        review_groups: Group name -> candidates, in configuration order
        use_assignee_groups: Pick assignees per group instead of flat list
        assignee_groups: Group name -> candidates, in configuration order
        skip_keywords: Title keywords that disable the run
        filter_labels: Label include/exclude rules
        run_on_draft: Process draft pull requests too
    """

    add_reviewers: bool = False
    add_assignees: Union[bool, str] = False
    reviewers: List[str] = field(default_factory=list)
    assignees: Optional[List[str]] = None
    number_of_reviewers: int = 0
    number_of_assignees: int = 0
    use_review_groups: bool = False
    review_groups: Dict[str, List[str]] = field(default_factory=dict)
    use_assignee_groups: bool = False
    assignee_groups: Dict[str, List[str]] = field(default_factory=dict)
    skip_keywords: List[str] = field(default_factory=list)
    filter_labels: FilterLabels = field(default_factory=FilterLabels)
    run_on_draft: bool = False


@dataclass
class PullRequest:
    """
    Metadata of the pull request being processed.

    The number never changes for a given PR, which makes it the key that
    keeps selections stable across runs.
    """

    number: int
    author: str
    title: str = ""
    draft: bool = False
    labels: List[str] = field(default_factory=list)

    def assign_key(self) -> int:
        return self.number

    @classmethod
    def from_event(cls, payload: Dict[str, Any]) -> "PullRequest":
        """Build from a pull_request / pull_request_target event payload"""
        pull_request = payload.get("pull_request")
        if not pull_request:
            raise ValueError("Event payload does not contain a pull_request")

        return cls(
            number=int(pull_request["number"]),
            author=(pull_request.get("user") or {}).get("login", ""),
            title=pull_request.get("title") or "",
            draft=bool(pull_request.get("draft", False)),
            labels=[
                label["name"] for label in pull_request.get("labels", [])
            ],
        )


@dataclass
class AssignmentResult:
    """Outcome of one run over a pull request"""

    reviewers: List[str] = field(default_factory=list)
    assignees: List[str] = field(default_factory=list)
    skipped_reason: Optional[str] = None

"""
Deterministic reviewer selection.

The pull request key is multiplied by a fixed low prime per slot and taken
modulo the size of the remaining pool. Picked users are removed from the
pool, so nobody is chosen twice and the same PR always gets the same users.

EXAMPLE:
Key: 7, Candidates: a, b, c, d, Number: 2
1. (7 * 1) mod 4 = 3 → d, remaining: a, b, c
2. (7 * 503) mod 3 = 2 → c
Result: d, c
"""

from typing import Dict, List, Optional

from lib.env_constants import PRIMES


def choose_users(
    key: int,
    candidates: List[str],
    desired_number: int,
    filter_user: str = "",
) -> List[str]:
    """
    Pick desired_number users from candidates, never filter_user.

    A desired_number of 0 returns every remaining candidate in order.
    The caller keeps desired_number within len(PRIMES).
    """
    filtered_candidates = [
        candidate for candidate in candidates if candidate != filter_user
    ]

    print(
        f"🔄 Assigning {desired_number} users for PR (Key: {key}). "
        f"Creator: {filter_user}. Candidates: {filtered_candidates}"
    )

    # all-assign
    if desired_number == 0:
        return filtered_candidates

    result: List[str] = []
    number_to_assign = min(desired_number, len(filtered_candidates))
    for i in range(number_to_assign):
        candidate_index = (key * PRIMES[i]) % len(filtered_candidates)
        assignee = filtered_candidates.pop(candidate_index)
        print(
            f"   ✅ {assignee} ({key} * {PRIMES[i]} mod "
            f"{len(filtered_candidates) + 1} = {candidate_index})"
        )
        result.append(assignee)
        print(f"   Remaining candidates: {filtered_candidates}")

    return result


def choose_users_from_groups(
    key: int,
    owner: str,
    groups: Optional[Dict[str, List[str]]],
    desired_number: int,
) -> List[str]:
    """
    Run choose_users on every group and concatenate in group order.

    Groups are independent: a user listed in two groups can be chosen twice.
    """
    users: List[str] = []
    for group_name, members in (groups or {}).items():
        print(f"🔄 Group: {group_name}")
        users.extend(
            choose_users(key, members or [], desired_number, owner)
        )
    return users


def includes_skip_keywords(title: str, skip_keywords: List[str]) -> bool:
    """Case-insensitive check for any skip keyword inside the title"""
    lowered_title = title.lower()
    return any(
        keyword.lower() in lowered_title for keyword in skip_keywords
    )

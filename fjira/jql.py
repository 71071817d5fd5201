"""Building the JQL used by the issue search."""

from __future__ import annotations

import re

from fjira.messages import ALL
from fjira.models import IssueStatus, Project, User

_ISSUE_KEY = re.compile(r"[A-Za-z0-9]{2,10}-[0-9]+")
_ONLY_NUMERIC = re.compile(r"[0-9]+")
_ORDER_BY = "ORDER BY status"


def is_issue_key(query: str) -> bool:
    """Whether *query* has the shape of an issue key such as ``ABC-12``."""
    return _ISSUE_KEY.fullmatch(query) is not None


def is_numeric_query(query: str) -> bool:
    """Whether *query* consists of digits only."""
    return _ONLY_NUMERIC.fullmatch(query) is not None


def expand_issue_query(project: Project | None, query: str) -> str:
    """Turn a bare issue number into a full key of *project*.

    The query is stripped; a number such as ``12`` becomes ``KEY-12`` when the
    project has a key, anything else is returned unchanged.
    """
    query = query.strip()
    if is_numeric_query(query) and project is not None and project.key:
        return f"{project.key}-{query}"
    return query


def build_search_issues_jql(
    project: Project | None,
    query: str,
    status: IssueStatus | None,
    user: User | None,
    label: str,
) -> str:
    """Build the JQL for an issue search narrowed by the given filters.

    Filters whose value is the "all" choice are left out. A query shaped
    like an issue key also matches that issue directly.
    """
    jql = ""
    if project is not None and project.id != ALL:
        jql += f"project={project.id}"
    query = query.strip()
    if query:
        jql += f' AND summary~"{query}*"'
    if status is not None and status.name != ALL:
        jql += f" AND status={status.id}"
    if user is not None and user.display_name != ALL:
        jql += f" AND assignee={user.account_id or user.name}"
    if label and label != ALL:
        jql += f" AND labels={label}"
    if query and is_issue_key(query):
        jql += f' OR issuekey="{query}"'
    return f"{jql.lstrip(' AND')} {_ORDER_BY}"
"""Plain-text rendering of issues, projects and statuses for list views."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Sequence

from fjira.messages import (
    MAX_STATUS_COL_WIDTH,
    MAX_SUMMARY_COL_WIDTH,
    TABLE_COLUMN_PADDING,
    UNASSIGNED,
)
from fjira.models import Issue, IssueStatus, IssueTransition, Project

_KEY_COL_WIDTH = 10
# Room for the brackets around the status plus a little air.
_STATUS_DECORATION = 4


def format_assignee(issue: Issue) -> str:
    """Return the assignee's display name, or the "unassigned" marker."""
    return issue.fields.assignee.display_name or UNASSIGNED


def format_issue(issue: Issue) -> str:
    """Render an issue on one line: key, summary, status and assignee."""
    return (
        f"{issue.key} {issue.fields.summary} "
        f"[{issue.fields.status.name}] - {format_assignee(issue)}"
    )


def format_issue_row(issue: Issue, summary_width: int, status_width: int) -> str:
    """Render an issue as a table row with right-aligned, capped columns."""
    summary_width = min(summary_width, MAX_SUMMARY_COL_WIDTH)
    status_width = min(status_width, MAX_STATUS_COL_WIDTH)
    summary = issue.fields.summary[:summary_width]
    status = f"[{issue.fields.status.name[:status_width].upper()}]"
    summary_col = summary_width + TABLE_COLUMN_PADDING
    status_col = status_width + _STATUS_DECORATION + TABLE_COLUMN_PADDING
    return (
        f"{issue.key:>{_KEY_COL_WIDTH}} "
        f"{summary:>{summary_col}} "
        f"{status:>{status_col}} "
        f"- {format_assignee(issue)}"
    )


def _column_width(issues: Iterable[Issue], column: Callable[[Issue], str]) -> int:
    return max((len(column(issue)) for issue in issues), default=0)


def format_issues(issues: Sequence[Issue]) -> list[str]:
    """Render issues as table rows whose columns line up."""
    summary_width = _column_width(issues, lambda issue: issue.fields.summary)
    status_width = _column_width(issues, lambda issue: issue.fields.status.name)
    return [format_issue_row(issue, summary_width, status_width) for issue in issues]


def format_project(project: Project) -> str:
    """Render a project as ``[KEY] Name``."""
    return f"[{project.key}] {project.name}"


def format_projects(projects: Iterable[Project]) -> list[str]:
    """Render each project with :func:`format_project`."""
    return [format_project(project) for project in projects]


def format_statuses(statuses: Iterable[IssueStatus]) -> list[str]:
    """Return the status names."""
    return [status.name for status in statuses]


def format_transitions(transitions: Iterable[IssueTransition]) -> list[str]:
    """Return the transition names."""
    return [transition.name for transition in transitions]


def issue_browse_url(api_url: str, issue: Issue) -> str:
    """Return the address at which the issue is shown in a browser."""
    return f"{api_url}/browse/{issue.key}"
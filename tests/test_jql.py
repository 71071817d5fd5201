import pytest

from fjira.jql import (
    build_search_issues_jql,
    expand_issue_query,
    is_issue_key,
    is_numeric_query,
)
from fjira.messages import ALL
from fjira.models import IssueStatus, Project, User


@pytest.mark.parametrize(
    "project, query, status, user, label, expected",
    [
        (Project(id="123"), "", None, None, "", "project=123 ORDER BY status"),
        (Project(id="123"), "abc", None, None, "", 'project=123 AND summary~"abc*" ORDER BY status'),
        (Project(id=ALL, key=ALL), "abc", None, None, "", 'summary~"abc*" ORDER BY status'),
        (
            Project(id="123"),
            "abc",
            IssueStatus(id="st1"),
            None,
            "",
            'project=123 AND summary~"abc*" AND status=st1 ORDER BY status',
        ),
        (
            Project(id="123"),
            "abc",
            IssueStatus(id="st1"),
            User(account_id="us1"),
            "",
            'project=123 AND summary~"abc*" AND status=st1 AND assignee=us1 ORDER BY status',
        ),
        (Project(id="123"), "", None, None, "test", "project=123 AND labels=test ORDER BY status"),
        (Project(id="123"), "", None, User(name="bob"), "", "project=123 AND assignee=bob ORDER BY status"),
    ],
)
def test_build_search_issues_jql(project, query, status, user, label, expected):
    assert build_search_issues_jql(project, query, status, user, label) == expected


def test_build_jql_skips_all_filters():
    jql = build_search_issues_jql(
        Project(id="123"), "", IssueStatus(id="1", name=ALL), User(account_id="u", display_name=ALL), ALL
    )
    assert jql == "project=123 ORDER BY status"


def test_build_jql_adds_issue_key_match():
    jql = build_search_issues_jql(Project(id="123"), "ABC-12", None, None, "")
    assert jql == 'project=123 AND summary~"ABC-12*" OR issuekey="ABC-12" ORDER BY status'


def test_build_jql_strips_query():
    jql = build_search_issues_jql(Project(id="123"), "  abc  ", None, None, "")
    assert jql == 'project=123 AND summary~"abc*" ORDER BY status'


@pytest.mark.parametrize(
    "query, expected",
    [("ISS-1", True), ("ISS1", False), ("", False), ("TEST-312313", True)],
)
def test_is_issue_key(query, expected):
    assert is_issue_key(query) is expected


def test_is_issue_key_rejects_trailing_newline():
    assert is_issue_key("ISS-1\n") is False


@pytest.mark.parametrize("query, expected", [("123", True), ("12a", False), ("", False)])
def test_is_numeric_query(query, expected):
    assert is_numeric_query(query) is expected


def test_expand_issue_query_numeric():
    assert expand_issue_query(Project(id="1", key="TEST"), " 42 ") == "TEST-42"


def test_expand_issue_query_without_key():
    assert expand_issue_query(Project(id="1"), "42") == "42"
    assert expand_issue_query(None, "42") == "42"


def test_expand_issue_query_text_unchanged():
    assert expand_issue_query(Project(id="1", key="TEST"), "summary") == "summary"
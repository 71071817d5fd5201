# fjira

A compact Python library for working with Jira from code. It contains:

- `fjira.client`: a REST client for Jira Cloud and Jira Server. It covers issues, projects,
  users, labels, transitions, project statuses, boards and filters.
- `fjira.models`: dataclasses for the resources the client returns, such as `Issue`, `Project`,
  `User`, `IssueStatus`, `IssueTransition`, `BoardItem`, `BoardConfiguration` and `Filter`.
  Each has a `from_dict` class method that reads the JSON that Jira sends.
- `fjira.jql`: the JQL builder that issue search uses, plus helpers that recognise issue keys.
- `fjira.formatting`: turns issues, projects, statuses and transitions into aligned text rows.
- `fjira.homedir`: finds the configuration directory, which is `~/.fjira` or
  `$XDG_CONFIG_HOME/fjira`.
- `fjira.messages`: user-facing message strings and table layout constants.

## Installation

```
pip install .
```

## Using the client

```python
from fjira.client import JiraClient, TokenType

with JiraClient("https://my-jira.example.com", "user@example.com", "token", TokenType.API) as jira:
    for project in jira.find_projects():
        print(project.key, project.name)

    issue = jira.get_issue_detailed("ABC-1")
    print(issue.fields.summary, issue.fields.status.name)
```

With `TokenType.API`, the client uses basic authentication built from the username and the
token. With `TokenType.PERSONAL`, it sends the token as a bearer token. The client then counts
the instance as Jira Server (`is_jira_server()` returns `True`), which changes two things:
user searches send `username` instead of `query`, and `get_my_filters()` reads favourite
filters instead of the user's own.

Other methods:

- `search`, `search_jql` and `search_jql_pageable` run searches.
- `find_users` and `find_users_with_query` look up users.
- `find_project` and `find_project_statuses` read project data.
- `find_labels` and `add_label` handle labels.
- `find_transitions` and `do_transition` handle transitions.
- `do_assignee` assigns an issue, and `do_comment` adds a comment.
- `find_boards`, `get_board_configuration` and `get_board_projects` read boards. `find_boards`
  follows pagination.
- `get_filter` reads one filter.
- `request_url` builds the URL for a REST path.

When `SSL_CERT_FILE` is set, the client uses that file to verify TLS. If the file cannot be read,
the constructor raises `JiraError`.

The client raises these errors, all of them subclasses of `JiraError`:

- `JiraError`: a request failed, or the status was 400 or above.
- `DeserializeError`: a response could not be decoded.
- `ProjectNotFoundError`: the project response was `null`.
- `AssignmentError`: `do_assignee` got a user with neither an account id nor a name.

## Building JQL and formatting results

```python
from fjira.jql import build_search_issues_jql, expand_issue_query
from fjira.formatting import format_issues
from fjira.models import Project

jql = build_search_issues_jql(Project(id="123"), "login", None, None, "")
# 'project=123 AND summary~"login*" ORDER BY status'

expand_issue_query(Project(key="ABC"), "12")
# 'ABC-12'

for row in format_issues(jira.search_jql(jql)):
    print(row)
```

`build_search_issues_jql` leaves out any filter whose value is the "All" choice. If the query
looks like an issue key, it also adds `OR issuekey="..."`.

## Configuration directory

`fjira.homedir.fjira_home_dir()` returns `$XDG_CONFIG_HOME/fjira` in two cases: when that
directory exists, or when `XDG_CONFIG_HOME` is set and `~/.fjira` does not exist. Otherwise it
returns `~/.fjira`. `user_home_dir()` raises `OSError` when the home variable is not set.

## What this package does not do

It is a library only. It has no interactive terminal interface and no command-line program. It
does not store workspaces or credentials. The configuration directory is located, but nothing is
read from it or written to it.

## Running the tests

```
pip install .[test]
pytest
```
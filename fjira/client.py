"""HTTP client for the Jira REST API."""

from __future__ import annotations

import json
import os
import posixpath
import re
from base64 import b64encode
from collections.abc import Mapping
from enum import Enum
from http import HTTPStatus
from typing import Any, Callable, TypeVar
from urllib.parse import quote_plus, urlencode, urlsplit, urlunsplit

import requests

from fjira.models import (
    BoardConfiguration,
    BoardItem,
    Filter,
    Issue,
    IssueStatus,
    IssueTransition,
    Project,
    User,
)

T = TypeVar("T")

SEARCH_PATH = "/rest/api/2/search"
ISSUE_KEY_PATTERN = re.compile(r"^[a-zA-Z0-9]{1,10}-[0-9]{1,20}$")
SEARCH_FIELDS = "id,key,summary,issuetype,project,reporter,status,assignee"
FIND_USERS_PATH = "/rest/api/2/user/assignable/search"
PROJECTS_PATH = "/rest/api/2/project"
PROJECT_BY_KEY_PATH = "/rest/api/2/project/{}"
PROJECT_STATUSES_PATH = "/rest/api/2/project/{}/statuses"
TRANSITIONS_PATH = "/rest/api/2/issue/{}/transitions"
ISSUE_PATH = "/rest/api/2/issue/{}"
ASSIGNEE_PATH_CLOUD = "/rest/api/2/issue/{}/assignee"
COMMENT_PATH = "/rest/api/2/issue/{}/comment"
LABELS_FOR_ISSUE_PATH = "/rest/api/1.0/labels/{}/suggest"
LABELS_FOR_PROJECT_PATH = "/rest/api/1.0/labels/suggest"
BOARDS_PATH = "/rest/agile/1.0/board"
BOARD_CONFIGURATION_PATH = "/rest/agile/1.0/board/{}/configuration"
BOARD_PROJECTS_PATH = "/rest/agile/1.0/board/{}/project"
FILTER_PATH = "/rest/api/2/filter/{}"
MY_FILTERS_PATH = "/rest/api/2/filter/my"
MY_FILTERS_PATH_SERVER = "/rest/api/2/filter/favourite"

_SEARCH_ERROR = "Cannot deserialize jira search response."
_USER_SEARCH_ERROR = "Cannot deserialize jira user search response."
_CONNECT_TIMEOUT = 30.0


class TokenType(str, Enum):
    """How the token given to the client authenticates."""

    API = "api token"
    PERSONAL = "personal token"


class JiraError(Exception):
    """A request to Jira failed."""


class DeserializeError(JiraError):
    """A Jira response could not be decoded."""


class ProjectNotFoundError(JiraError):
    """The requested project does not exist."""


class AssignmentError(JiraError):
    """The user carries neither an account id nor a name."""


def _as_list(value: Any) -> list[Any]:
    if value is None:
        return []
    if not isinstance(value, list):
        raise TypeError("expected a JSON array")
    return value


def _as_mapping(value: Any) -> Mapping[str, Any]:
    if value is None:
        return {}
    if not isinstance(value, Mapping):
        raise TypeError("expected a JSON object")
    return value


def _as_int(value: Any) -> int:
    if value is None:
        return 0
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError("expected an integer")
    return value


def _decode(raw: bytes, parse: Callable[[Any], T], message: str) -> T:
    try:
        return parse(json.loads(raw))
    except (ValueError, TypeError) as exc:
        raise DeserializeError(message) from exc


def _join_paths(*segments: str) -> str:
    joined = "/".join(segment for segment in segments if segment)
    if not joined:
        return ""
    cleaned = posixpath.normpath(re.sub(r"/{2,}", "/", joined))
    return cleaned if cleaned.startswith("/") else "/" + cleaned


def _param_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def _tls_verify() -> bool | str:
    cert_file = os.environ.get("SSL_CERT_FILE", "")
    if not cert_file:
        return True
    try:
        with open(cert_file, "rb"):
            pass
    except OSError as exc:
        raise JiraError(f"Cannot read file for SSL_CERT_FILE. {exc}") from exc
    return cert_file


def _status_text(response: requests.Response) -> str:
    reason = response.reason
    if not reason:
        try:
            reason = HTTPStatus(response.status_code).phrase
        except ValueError:
            reason = ""
    return f"{response.status_code} {reason}".strip()


class JiraClient:
    """Talks to one Jira instance over its REST API."""

    def __init__(self, api_url: str, username: str, token: str, token_type: TokenType = TokenType.API):
        self._api_url = api_url
        self._token_type = TokenType(token_type)
        self._base = urlsplit(api_url)
        if self._token_type is TokenType.PERSONAL:
            authorization = f"Bearer {token}"
        else:
            credentials = b64encode(f"{username}:{token}".encode()).decode("ascii")
            authorization = f"Basic {credentials}"
        session = requests.Session()
        session.headers.update(
            {
                "Authorization": authorization,
                "Accept": "application/json",
                "Content-Type": "application/json",
            }
        )
        session.verify = _tls_verify()
        self._session = session

    def __enter__(self) -> JiraClient:
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()

    @property
    def api_url(self) -> str:
        """The Jira URL the client was created with."""
        return self._api_url

    def is_jira_server(self) -> bool:
        """Whether the instance is an on-premise server (personal token auth)."""
        return self._token_type is TokenType.PERSONAL

    def close(self) -> None:
        """Release pooled connections."""
        self._session.close()

    def request_url(self, rest_path: str, params: Mapping[str, Any] | None = None) -> str:
        """Build the full URL for *rest_path* with the given query parameters."""
        if params is None:
            query = ""
        elif isinstance(params, Mapping):
            query = urlencode(
                sorted((name, _param_value(value)) for name, value in params.items() if value is not None)
            )
        else:
            raise TypeError(f"query parameters must be a mapping, got {type(params).__name__}")
        path = _join_paths(self._base.path, rest_path)
        return urlunsplit((self._base.scheme, self._base.netloc, path, query, ""))

    def _request(
        self,
        method: str,
        rest_path: str,
        params: Mapping[str, Any] | None = None,
        body: Any = None,
    ) -> bytes:
        url = self.request_url(rest_path, params)
        data = json.dumps(body).encode() if body is not None else None
        try:
            response = self._session.request(method, url, data=data, timeout=(_CONNECT_TIMEOUT, None))
        except requests.RequestException as exc:
            raise JiraError(str(exc)) from exc
        with response:
            if response.status_code >= 400:
                raise JiraError(f"Jira error, status: {_status_text(response)} - request: {url}")
            return response.content

    # --- search -------------------------------------------------------

    def search(self, query: str) -> tuple[list[Issue], int]:
        """Search by summary, or by key when *query* looks like an issue key."""
        if ISSUE_KEY_PATTERN.match(query):
            jql = f'key="{query}"'
        else:
            jql = f'summary~"{query}*"'
        issues, total, _ = self.search_jql_pageable(jql, 0, 100)
        return issues, total

    def search_jql(self, jql: str) -> list[Issue]:
        """Return the first page (up to 100) of issues matching *jql*."""
        issues, _, _ = self.search_jql_pageable(jql, 0, 100)
        return issues

    def search_jql_pageable(self, jql: str, page: int, page_size: int) -> tuple[list[Issue], int, int]:
        """Return ``(issues, total, max_results)`` for one page of a JQL search."""
        params = {
            "jql": jql,
            "maxResults": page_size,
            "fields": SEARCH_FIELDS,
            "startAt": page * page_size,
        }
        raw = self._request("GET", SEARCH_PATH, params)

        def parse(data: Any) -> tuple[list[Issue], int, int]:
            data = _as_mapping(data)
            issues = [Issue.from_dict(item) for item in _as_list(data.get("issues"))]
            return issues, _as_int(data.get("total")), _as_int(data.get("maxResults"))

        return _decode(raw, parse, _SEARCH_ERROR)

    # --- users --------------------------------------------------------

    def find_users(self, project: str) -> list[User]:
        """Return users assignable in *project*."""
        return self.find_users_with_query(project, "")

    def find_users_with_query(self, project: str, query: str) -> list[User]:
        """Return assignable users in *project* matching *query*."""
        server = self.is_jira_server()
        params = {
            "project": project,
            "maxResults": 10000,
            "query": query if query and not server else None,
            "username": query if query and server else None,
        }
        raw = self._request("GET", FIND_USERS_PATH, params)
        return _decode(raw, lambda data: [User.from_dict(item) for item in _as_list(data)], _USER_SEARCH_ERROR)

    # --- projects -----------------------------------------------------

    def find_projects(self) -> list[Project]:
        """Return every project visible to the user."""
        raw = self._request("GET", PROJECTS_PATH)
        return _decode(
            raw,
            lambda data: [Project.from_dict(item) for item in _as_list(data)],
            "Cannot deserialize jira projects response.",
        )

    def find_project(self, project_key: str) -> Project:
        """Return the project with *project_key*."""
        raw = self._request("GET", PROJECT_BY_KEY_PATH.format(quote_plus(project_key)))
        data = _decode(raw, lambda value: value, "Cannot deserialize jira project response.")
        if data is None:
            raise ProjectNotFoundError("Project not found.")
        return _decode(raw, Project.from_dict, "Cannot deserialize jira project response.")

    def find_project_statuses(self, project_id: str) -> list[IssueStatus]:
        """Return the distinct statuses (by name) used in a project, in first-seen order."""
        try:
            raw = self._request("GET", PROJECT_STATUSES_PATH.format(project_id))
        except JiraError as exc:
            raise DeserializeError(_SEARCH_ERROR) from exc

        def parse(data: Any) -> list[IssueStatus]:
            seen: set[str] = set()
            statuses = []
            for row in _as_list(data):
                for item in _as_list(_as_mapping(row).get("statuses")):
                    status = IssueStatus.from_dict(item)
                    if status.name in seen:
                        continue
                    seen.add(status.name)
                    statuses.append(status)
            return statuses

        return _decode(raw, parse, _SEARCH_ERROR)

    # --- labels -------------------------------------------------------

    def find_labels(self, issue: Issue | None, query: str) -> list[str]:
        """Return label suggestions for an issue, or for the whole instance."""
        path = LABELS_FOR_ISSUE_PATH.format(quote_plus(issue.id)) if issue is not None else LABELS_FOR_PROJECT_PATH
        raw = self._request("GET", path, {"query": query})

        def parse(data: Any) -> list[str]:
            labels = []
            for item in _as_list(_as_mapping(data).get("suggestions")):
                label = _as_mapping(item).get("label") or ""
                if not isinstance(label, str):
                    raise TypeError("label must be a string")
                labels.append(label)
            return labels

        return _decode(raw, parse, "Cannot deserialize jira labels response.")

    def add_label(self, issue_id: str, label: str) -> None:
        """Add *label* to the issue."""
        body = {"update": {"labels": [{"add": label}]}}
        self._request("PUT", ISSUE_PATH.format(quote_plus(issue_id)), {}, body)

    # --- transitions, assignment, comments ---------------------------

    def find_transitions(self, issue_id: str) -> list[IssueTransition]:
        """Return the transitions available for an issue."""
        try:
            raw = self._request("GET", TRANSITIONS_PATH.format(issue_id), {})
        except JiraError as exc:
            raise DeserializeError(_SEARCH_ERROR) from exc
        return _decode(
            raw,
            lambda data: [IssueTransition.from_dict(item) for item in _as_list(_as_mapping(data).get("transitions"))],
            _SEARCH_ERROR,
        )

    def do_transition(self, issue_id: str, transition: IssueTransition) -> None:
        """Move an issue through *transition*."""
        self._request("POST", TRANSITIONS_PATH.format(issue_id), {}, {"transition": transition.id})

    def do_assignee(self, issue_id: str, user: User) -> None:
        """Assign *user* to the issue, by account id (cloud) or name (server)."""
        if user.account_id:
            path = ASSIGNEE_PATH_CLOUD.format(issue_id)
            body: dict[str, Any] = {"accountId": user.account_id}
        elif user.name:
            path = ISSUE_PATH.format(issue_id)
            body = {"fields": {"assignee": {"name": user.name}}}
        else:
            raise AssignmentError("invalid assignee data. Cannot perform do-assignment request")
        self._request("PUT", path, None, body)

    def get_issue_detailed(self, issue_id: str) -> Issue:
        """Return an issue with its description, comments and labels."""
        raw = self._request("GET", ISSUE_PATH.format(issue_id), {})
        return _decode(raw, Issue.from_dict, _SEARCH_ERROR)

    def do_comment(self, issue_id: str, comment_body: str) -> None:
        """Add a comment to the issue."""
        self._request("POST", COMMENT_PATH.format(issue_id), {}, {"body": comment_body})

    # --- boards and filters ------------------------------------------

    def find_boards(self, project_key_or_id: str) -> list[BoardItem]:
        """Return every board of a project, following pagination."""
        boards: list[BoardItem] = []
        start_at = 0
        while True:
            raw = self._request("GET", BOARDS_PATH, {"projectKeyOrId": project_key_or_id, "startAt": start_at})

            def parse(data: Any) -> tuple[list[BoardItem], bool, int]:
                data = _as_mapping(data)
                values = [BoardItem.from_dict(item) for item in _as_list(data.get("values"))]
                is_last = data.get("isLast") or False
                if not isinstance(is_last, bool):
                    raise TypeError("isLast must be a boolean")
                return values, is_last, _as_int(data.get("maxResults"))

            values, is_last, max_results = _decode(raw, parse, "Cannot deserialize jira boards response.")
            boards.extend(values)
            if is_last:
                return boards
            start_at += max_results

    def get_board_configuration(self, board_id: int) -> BoardConfiguration:
        """Return the column configuration of a board."""
        raw = self._request("GET", BOARD_CONFIGURATION_PATH.format(board_id), {})
        return _decode(raw, BoardConfiguration.from_dict, "Cannot deserialize jira board configuration.")

    def get_board_projects(self, board_id: int) -> list[Project]:
        """Return the projects associated with a board."""
        raw = self._request("GET", BOARD_PROJECTS_PATH.format(board_id), {})
        return _decode(
            raw,
            lambda data: [Project.from_dict(item) for item in _as_list(_as_mapping(data).get("values"))],
            "Cannot deserialize jira board projects response.",
        )

    def get_filter(self, filter_id: str) -> Filter:
        """Return a saved filter."""
        raw = self._request("GET", FILTER_PATH.format(filter_id), {})
        return _decode(raw, Filter.from_dict, "Cannot deserialize jira filter response.")

    def get_my_filters(self) -> list[Filter]:
        """Return the user's own (cloud) or favourite (server) filters."""
        path = MY_FILTERS_PATH_SERVER if self.is_jira_server() else MY_FILTERS_PATH
        raw = self._request("GET", path, {})
        return _decode(
            raw,
            lambda data: [Filter.from_dict(item) for item in _as_list(data)],
            "Cannot deserialize jira filters response.",
        )
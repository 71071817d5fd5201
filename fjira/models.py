"""Data types for the Jira REST resources the client works with."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Callable, TypeVar

T = TypeVar("T")


def _mapping(value: Any) -> Mapping[str, Any]:
    if value is None:
        return {}
    if not isinstance(value, Mapping):
        raise TypeError(f"expected a JSON object, got {type(value).__name__}")
    return value


def _lookup(data: Mapping[str, Any], key: str) -> Any:
    """Find *key*, preferring an exact match and falling back to any case."""
    if key in data:
        return data[key]
    lowered = key.lower()
    for name, value in data.items():
        if isinstance(name, str) and name.lower() == lowered:
            return value
    return None


def _str(data: Mapping[str, Any], key: str) -> str:
    value = _lookup(data, key)
    if value is None:
        return ""
    if not isinstance(value, str):
        raise TypeError(f"field {key!r} must be a string")
    return value


def _int(data: Mapping[str, Any], key: str) -> int:
    value = _lookup(data, key)
    if value is None:
        return 0
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"field {key!r} must be an integer")
    return value


def _bool(data: Mapping[str, Any], key: str) -> bool:
    value = _lookup(data, key)
    if value is None:
        return False
    if not isinstance(value, bool):
        raise TypeError(f"field {key!r} must be a boolean")
    return value


def _list(data: Mapping[str, Any], key: str, item: Callable[[Any], T]) -> list[T]:
    value = _lookup(data, key)
    if value is None:
        return []
    if not isinstance(value, list):
        raise TypeError(f"field {key!r} must be a list")
    return [item(element) for element in value]


def _string_item(value: Any) -> str:
    if not isinstance(value, str):
        raise TypeError("list items must be strings")
    return value


@dataclass
class Project:
    id: str = ""
    name: str = ""
    key: str = ""

    @classmethod
    def from_dict(cls, data: Any) -> Project:
        data = _mapping(data)
        return cls(id=_str(data, "id"), name=_str(data, "name"), key=_str(data, "key"))


@dataclass
class User:
    account_id: str = ""
    active: bool = False
    avatar_urls: dict[str, str] | None = None
    display_name: str = ""
    email_address: str = ""
    locale: str = ""
    self_url: str = ""
    time_zone: str = ""
    key: str = ""  # on-premise installations
    name: str = ""  # on-premise installations

    @classmethod
    def from_dict(cls, data: Any) -> User:
        data = _mapping(data)
        avatars = _lookup(data, "avatarUrls")
        return cls(
            account_id=_str(data, "accountId"),
            active=_bool(data, "active"),
            avatar_urls=dict(_mapping(avatars)) if avatars is not None else None,
            display_name=_str(data, "displayName"),
            email_address=_str(data, "emailAddress"),
            locale=_str(data, "locale"),
            self_url=_str(data, "self"),
            time_zone=_str(data, "timeZone"),
            key=_str(data, "key"),
            name=_str(data, "name"),
        )


@dataclass
class Person:
    """Reporter or assignee of an issue."""

    account_id: str = ""
    display_name: str = ""

    @classmethod
    def from_dict(cls, data: Any) -> Person:
        data = _mapping(data)
        return cls(account_id=_str(data, "accountId"), display_name=_str(data, "displayName"))


@dataclass
class IssueType:
    name: str = ""

    @classmethod
    def from_dict(cls, data: Any) -> IssueType:
        return cls(name=_str(_mapping(data), "name"))


@dataclass
class Status:
    id: str = ""
    name: str = ""

    @classmethod
    def from_dict(cls, data: Any) -> Status:
        data = _mapping(data)
        return cls(id=_str(data, "id"), name=_str(data, "name"))


@dataclass
class IssueStatus:
    id: str = ""
    name: str = ""
    description: str = ""

    @classmethod
    def from_dict(cls, data: Any) -> IssueStatus:
        data = _mapping(data)
        return cls(
            id=_str(data, "id"),
            name=_str(data, "name"),
            description=_str(data, "description"),
        )


@dataclass
class TransitionTarget:
    status_url: str = ""
    status_id: str = ""
    name: str = ""

    @classmethod
    def from_dict(cls, data: Any) -> TransitionTarget:
        data = _mapping(data)
        return cls(
            status_url=_str(data, "self"),
            status_id=_str(data, "id"),
            name=_str(data, "name"),
        )


@dataclass
class IssueTransition:
    id: str = ""
    name: str = ""
    to: TransitionTarget = field(default_factory=TransitionTarget)

    @classmethod
    def from_dict(cls, data: Any) -> IssueTransition:
        data = _mapping(data)
        return cls(
            id=_str(data, "id"),
            name=_str(data, "name"),
            to=TransitionTarget.from_dict(_lookup(data, "to")),
        )


@dataclass
class Comment:
    author: User = field(default_factory=User)
    body: str = ""
    created: str = ""

    @classmethod
    def from_dict(cls, data: Any) -> Comment:
        data = _mapping(data)
        return cls(
            author=User.from_dict(_lookup(data, "author")),
            body=_str(data, "body"),
            created=_str(data, "created"),
        )


@dataclass
class CommentPage:
    comments: list[Comment] = field(default_factory=list)
    max_results: int = 0
    total: int = 0
    start_at: int = 0

    @classmethod
    def from_dict(cls, data: Any) -> CommentPage:
        data = _mapping(data)
        return cls(
            comments=_list(data, "comments", Comment.from_dict),
            max_results=_int(data, "maxResults"),
            total=_int(data, "total"),
            start_at=_int(data, "startAt"),
        )


@dataclass
class IssueFields:
    summary: str = ""
    project: Project = field(default_factory=Project)
    description: str = ""
    reporter: Person = field(default_factory=Person)
    assignee: Person = field(default_factory=Person)
    type: IssueType = field(default_factory=IssueType)
    status: Status = field(default_factory=Status)
    comment: CommentPage = field(default_factory=CommentPage)
    labels: list[str] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Any) -> IssueFields:
        data = _mapping(data)
        return cls(
            summary=_str(data, "summary"),
            project=Project.from_dict(_lookup(data, "project")),
            description=_str(data, "description"),
            reporter=Person.from_dict(_lookup(data, "reporter")),
            assignee=Person.from_dict(_lookup(data, "assignee")),
            type=IssueType.from_dict(_lookup(data, "issuetype")),
            status=Status.from_dict(_lookup(data, "status")),
            comment=CommentPage.from_dict(_lookup(data, "comment")),
            labels=_list(data, "labels", _string_item),
        )


@dataclass
class Issue:
    key: str = ""
    fields: IssueFields = field(default_factory=IssueFields)
    id: str = ""

    @classmethod
    def from_dict(cls, data: Any) -> Issue:
        data = _mapping(data)
        return cls(
            key=_str(data, "key"),
            fields=IssueFields.from_dict(_lookup(data, "fields")),
            id=_str(data, "id"),
        )


@dataclass
class BoardItem:
    id: int = 0
    self_url: str = ""
    name: str = ""
    type: str = ""

    @classmethod
    def from_dict(cls, data: Any) -> BoardItem:
        data = _mapping(data)
        return cls(
            id=_int(data, "id"),
            self_url=_str(data, "self"),
            name=_str(data, "name"),
            type=_str(data, "type"),
        )


@dataclass
class BoardLocation:
    type: str = ""
    key: str = ""
    id: str = ""
    self_url: str = ""
    name: str = ""

    @classmethod
    def from_dict(cls, data: Any) -> BoardLocation:
        data = _mapping(data)
        return cls(
            type=_str(data, "type"),
            key=_str(data, "key"),
            id=_str(data, "id"),
            self_url=_str(data, "self"),
            name=_str(data, "name"),
        )


@dataclass
class BoardFilter:
    id: str = ""
    self_url: str = ""

    @classmethod
    def from_dict(cls, data: Any) -> BoardFilter:
        data = _mapping(data)
        return cls(id=_str(data, "id"), self_url=_str(data, "self"))


@dataclass
class BoardColumnStatus:
    id: str = ""
    self_url: str = ""

    @classmethod
    def from_dict(cls, data: Any) -> BoardColumnStatus:
        data = _mapping(data)
        return cls(id=_str(data, "id"), self_url=_str(data, "self"))


@dataclass
class BoardColumn:
    name: str = ""
    statuses: list[BoardColumnStatus] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Any) -> BoardColumn:
        data = _mapping(data)
        return cls(
            name=_str(data, "name"),
            statuses=_list(data, "statuses", BoardColumnStatus.from_dict),
        )


@dataclass
class BoardConfiguration:
    id: int = 0
    name: str = ""
    type: str = ""
    self_url: str = ""
    location: BoardLocation = field(default_factory=BoardLocation)
    filter: BoardFilter = field(default_factory=BoardFilter)
    sub_query: str = ""
    columns: list[BoardColumn] = field(default_factory=list)
    constraint_type: str = ""
    rank_custom_field_id: int = 0

    @classmethod
    def from_dict(cls, data: Any) -> BoardConfiguration:
        data = _mapping(data)
        column_config = _mapping(_lookup(data, "columnConfig"))
        return cls(
            id=_int(data, "id"),
            name=_str(data, "name"),
            type=_str(data, "type"),
            self_url=_str(data, "self"),
            location=BoardLocation.from_dict(_lookup(data, "location")),
            filter=BoardFilter.from_dict(_lookup(data, "filter")),
            sub_query=_str(_mapping(_lookup(data, "subQuery")), "query"),
            columns=_list(column_config, "columns", BoardColumn.from_dict),
            constraint_type=_str(column_config, "constraintType"),
            rank_custom_field_id=_int(_mapping(_lookup(data, "ranking")), "rankCustomFieldId"),
        )


@dataclass
class Filter:
    id: str = ""
    name: str = ""
    jql: str = ""
    favourite: bool = False

    @classmethod
    def from_dict(cls, data: Any) -> Filter:
        data = _mapping(data)
        return cls(
            id=_str(data, "id"),
            name=_str(data, "name"),
            jql=_str(data, "jql"),
            favourite=_bool(data, "favourite"),
        )
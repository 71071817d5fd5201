"""Jira REST client, data models, JQL builder and issue formatting helpers."""

__version__ = "0.1.0"

__all__ = ["client", "formatting", "homedir", "jql", "messages", "models"]
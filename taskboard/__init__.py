"""Taskboard: a small async CRUD service for tasks and the users they are assigned to."""

__version__ = "1.0.0"

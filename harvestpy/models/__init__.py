"""Data models for Harvest API resources."""

from .time_entry import NamedRef, Project, Task, TimeEntriesPage, TimeEntry, User

__all__ = ['NamedRef', 'Project', 'Task', 'TimeEntriesPage', 'TimeEntry', 'User']

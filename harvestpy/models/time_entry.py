"""Time entry models returned by the Harvest API."""
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from ..api.response import Pagination


def _get_int(data: Dict[str, Any], key: str) -> int:
    value = data.get(key)
    if value is None:
        return 0
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{key} is not an integer: {value!r}")
    return value


def _get_float(data: Dict[str, Any], key: str) -> float:
    value = data.get(key)
    if value is None:
        return 0.0
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise TypeError(f"{key} is not a number: {value!r}")
    return float(value)


def _get_str(data: Dict[str, Any], key: str) -> str:
    value = data.get(key)
    if value is None:
        return ""
    if not isinstance(value, str):
        raise TypeError(f"{key} is not a string: {value!r}")
    return value


@dataclass(frozen=True)
class NamedRef:
    """A reference to another Harvest object: just its id and name."""

    id: int = 0
    name: str = ""

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> "NamedRef":
        """Create from API response dict (None gives an empty reference)."""
        if data is None:
            return cls()
        if not isinstance(data, dict):
            raise TypeError(f"{cls.__name__.lower()} is not a JSON object")
        return cls(id=_get_int(data, "id"), name=_get_str(data, "name"))


class Project(NamedRef):
    """Project a time entry is booked on."""


class User(NamedRef):
    """User who tracked a time entry."""


class Task(NamedRef):
    """Task a time entry is booked on."""


@dataclass(frozen=True)
class TimeEntry:
    """A Harvest time entry as it was when fetched."""

    id: int = 0
    hours: float = 0.0
    notes: str = ""
    project: Project = field(default_factory=Project)
    user: User = field(default_factory=User)
    task: Task = field(default_factory=Task)
    spent_date: str = ""

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "TimeEntry":
        """Create from API response dict.

        Args:
            data: One element of the ``time_entries`` array

        Returns:
            TimeEntry with absent or null fields at their zero value

        Raises:
            TypeError: If data is not a dict or a field has the wrong JSON type
        """
        if not isinstance(data, dict):
            raise TypeError(f"time entry is not a JSON object: {data!r}")
        return cls(
            id=_get_int(data, "id"),
            hours=_get_float(data, "hours"),
            notes=_get_str(data, "notes"),
            project=Project.from_dict(data.get("project")),
            user=User.from_dict(data.get("user")),
            task=Task.from_dict(data.get("task")),
            spent_date=_get_str(data, "spent_date"),
        )


@dataclass
class TimeEntriesPage:
    """One page of the time entries list: pagination plus the entries in server order."""

    pagination: Pagination = field(default_factory=Pagination)
    time_entries: List[TimeEntry] = field(default_factory=list)

    def load_json(self, payload: Any) -> None:
        if not isinstance(payload, dict):
            raise TypeError(f"expected a JSON object, got {type(payload).__name__}")
        raw_entries = payload.get("time_entries") or []
        if not isinstance(raw_entries, list):
            raise TypeError("time_entries is not a JSON array")
        self.pagination = Pagination.from_dict(payload)
        self.time_entries = [TimeEntry.from_dict(e) for e in raw_entries]

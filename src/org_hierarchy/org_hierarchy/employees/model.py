from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional


@dataclass(frozen=True)
class SupervisorRef:
    """Reference from an employee to one of its direct supervisors.

    The id may point to an employee that is missing from the current snapshot.
    """

    id: str
    name: str
    role: str


@dataclass(frozen=True)
class EmployeeRecord:
    """Employee row as delivered by a hierarchy data source.

    Note: immutable snapshot value, never modified by the hierarchy builder.
    """

    id: str
    name: str
    email: str
    role: str
    supervisors: tuple[SupervisorRef, ...] = field(default_factory=tuple)
    custom_role: Optional[str] = None
    avatar_url: Optional[str] = None

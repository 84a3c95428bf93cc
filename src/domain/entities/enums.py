"""
Planeja+ Domain Enums

All enumeration types used across domain entities.
"""

from enum import Enum


class InvitationStatus(str, Enum):
    """Invitation status. Every status except pending is terminal."""

    pending = "pending"
    accepted = "accepted"
    rejected = "rejected"
    cancelled = "cancelled"
    expired = "expired"


class InvitationRole(str, Enum):
    """Role granted to the recipient once the invitation is accepted"""

    owner = "owner"
    admin = "admin"
    member = "member"
    observer = "observer"


class InvitationTargetType(str, Enum):
    """What the recipient is being invited to join"""

    project = "project"
    team = "team"


class InvitationActivityType(str, Enum):
    """Audit log entry type"""

    sent = "sent"
    accepted = "accepted"
    rejected = "rejected"
    cancelled = "cancelled"
    resent = "resent"


class ProjectStatus(str, Enum):
    active = "active"
    completed = "completed"
    on_hold = "on-hold"


class Priority(str, Enum):
    low = "low"
    medium = "medium"
    high = "high"
    urgent = "urgent"


class TaskStatus(str, Enum):
    pending = "pending"
    in_progress = "in-progress"
    completed = "completed"
    overdue = "overdue"


class TeamMemberRole(str, Enum):
    leader = "leader"
    owner = "owner"
    admin = "admin"
    member = "member"
    observer = "observer"


class ProjectMemberRole(str, Enum):
    """Role granted on a project through an accepted invitation"""

    owner = "owner"
    admin = "admin"
    member = "member"
    observer = "observer"


class CalendarEventType(str, Enum):
    meeting = "meeting"
    deadline = "deadline"
    task = "task"
    milestone = "milestone"
    reminder = "reminder"
    other = "other"


class CalendarEventStatus(str, Enum):
    scheduled = "scheduled"
    completed = "completed"
    cancelled = "cancelled"

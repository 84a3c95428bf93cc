"""
Planeja+ Domain Entities

All domain entities organized by model.
Each entity in its own file for better maintainability.
"""

# Export all enums
from .enums import (
    CalendarEventStatus,
    CalendarEventType,
    InvitationActivityType,
    InvitationRole,
    InvitationStatus,
    InvitationTargetType,
    Priority,
    ProjectMemberRole,
    ProjectStatus,
    TaskStatus,
    TeamMemberRole,
)

# Export all entities
from .acting_user import ActingUser
from .calendar_event import CalendarEvent, CalendarParticipant, CalendarReminder
from .invitation import Invitation
from .invitation_activity import InvitationActivity
from .project import Project, ProjectMember
from .rate_limit_counter import RateLimitCounter
from .task import TASK_TITLE_MAX_LENGTH, Task, TaskAssignee
from .team import ProjectTeam, Team, TeamMember

__all__ = [
    # Enums
    "CalendarEventStatus",
    "CalendarEventType",
    "InvitationActivityType",
    "InvitationRole",
    "InvitationStatus",
    "InvitationTargetType",
    "Priority",
    "ProjectMemberRole",
    "ProjectStatus",
    "TaskStatus",
    "TeamMemberRole",
    # Entities
    "ActingUser",
    "CalendarEvent",
    "CalendarParticipant",
    "CalendarReminder",
    "Invitation",
    "InvitationActivity",
    "Project",
    "ProjectMember",
    "RateLimitCounter",
    "Task",
    "TaskAssignee",
    "Team",
    "TeamMember",
    "ProjectTeam",
    "TASK_TITLE_MAX_LENGTH",
]

"""
ActingUser

The authenticated caller, decoded from the access token. Not persisted:
identities live with the external authentication provider.
"""

from uuid import UUID

from sqlmodel import SQLModel


class ActingUser(SQLModel):
    id: UUID
    name: str
    email: str

"""Pydantic schemas for registered identities and the active session."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class Identity(BaseModel):
    """A registered user's durable record, including the stored secret."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(..., description="Immutable identity id")
    email: str = Field(..., description="Unique email, compared exactly")
    username: str = Field(..., description="Unique username, compared exactly")
    stored_secret: str = Field(..., repr=False, description="Secret as produced by the secret context")
    is_video_creator: bool = Field(default=False)

    def to_session(self, *, is_admin: bool) -> SessionUser:
        """Project onto the secret-free session shape."""
        return SessionUser(
            id=self.id,
            email=self.email,
            username=self.username,
            is_video_creator=self.is_video_creator,
            is_admin=is_admin,
        )


class SessionUser(BaseModel):
    """The currently authenticated user's projection plus derived role."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    id: str
    email: str
    username: str
    is_video_creator: bool = False
    is_admin: bool = False

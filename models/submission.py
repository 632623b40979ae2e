from datetime import datetime, timezone

from beanie import Document
from pydantic import BaseModel, ConfigDict, Field


class Submission(Document):
    """Contact form submission. Fields the form adds beyond the known ones are stored as-is."""

    model_config = ConfigDict(extra="allow")

    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc), alias="createdAt")
    submitted_at: str = Field(..., alias="submittedAt")
    name: str = Field(...)
    email: str = Field(...)
    message: str = Field(...)
    phone: str | None = Field(None)
    city: str | None = Field(None)
    ip_address: str = Field("unknown", alias="ipAddress")
    user_agent: str = Field("unknown", alias="userAgent")

    class Settings:
        name = "submissions"


class SubmissionPayload(BaseModel):
    """Contact form body. Unknown fields are kept and stored alongside the known ones."""

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    name: str | None = None
    email: str | None = None
    message: str | None = None
    phone: str | None = None
    city: str | None = None
    ip_address: str | None = Field(None, alias="ipAddress")
    user_agent: str | None = Field(None, alias="userAgent")

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class DockerAuthConfig(BaseModel):
    """Registry credentials passed to docker when pulling the workload image."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    username: Optional[str] = None
    password: Optional[str] = None
    email: Optional[str] = None
    serveraddress: Optional[str] = None


class DockerConfig(BaseModel):
    model_config = ConfigDict(extra="ignore", validate_assignment=True)

    image: str
    create_options: str = ""
    auth: DockerAuthConfig = Field(default_factory=DockerAuthConfig)

    @field_validator("image")
    @classmethod
    def _image_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("image must not be empty")
        return value

from __future__ import annotations

import os
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Settings(BaseModel):
    """Runtime settings for the static file server.

    ``root_dir`` is supplied explicitly (``STATIC_ROOT``) instead of being
    inferred from where the program happens to be installed.
    """

    model_config = ConfigDict(frozen=True)

    root_dir: Path
    host: str = "0.0.0.0"
    port: int = Field(default=3000, ge=1, le=65535)
    index_file: str = "index.html"

    @field_validator("root_dir")
    @classmethod
    def _root_must_be_directory(cls, value: Path) -> Path:
        value = value.expanduser().resolve()
        if not value.is_dir():
            raise ValueError(f"{value} is not a directory")
        return value

    @classmethod
    def from_env(cls) -> Settings:
        return cls(
            root_dir=Path(os.getenv("STATIC_ROOT", os.getcwd())),
            host=os.getenv("HOST", "0.0.0.0"),
            port=os.getenv("PORT", "3000"),
        )

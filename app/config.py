"""Application configuration loaded from config.yaml + environment variables."""

from __future__ import annotations

import yaml
from pathlib import Path
from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings

_CONFIG_PATH = Path(__file__).resolve().parent.parent / "config.yaml"

DEFAULT_JWT_SECRET = "change-me"


def _load_yaml() -> dict:
    if _CONFIG_PATH.exists():
        with open(_CONFIG_PATH) as f:
            return yaml.safe_load(f) or {}
    return {}


_yaml = _load_yaml()


class UploadConfig(BaseSettings):
    directory: str = "uploads"
    max_files: int = 5
    cleanup_on_failure: bool = True

    model_config = {"env_prefix": "UPLOADS__"}


class Settings(BaseSettings):
    database_url: str = "sqlite+aiosqlite:///data/complaints.db"
    port: int = 10000
    public_base_url: str = Field(
        default="",
        validation_alias=AliasChoices("public_base_url", "render_external_url"),
    )
    jwt_secret: str = DEFAULT_JWT_SECRET
    token_ttl_minutes: int = 120
    listing_requires_auth: bool = True
    cors_origins: list[str] = Field(default_factory=lambda: ["*"])
    log_level: str = "INFO"
    uploads: UploadConfig = Field(default_factory=UploadConfig)

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8", "populate_by_name": True,
                    "env_nested_delimiter": "__"}

    @property
    def base_url(self) -> str:
        """Externally visible origin used to build absolute attachment URLs."""
        url = self.public_base_url or f"http://localhost:{self.port}"
        return url.rstrip("/")


def get_settings() -> Settings:
    """Build Settings by merging YAML defaults with env overrides.

    Values from the environment (or .env) win over config.yaml; YAML values
    are passed as init kwargs only for keys the environment leaves unset.
    """
    y = dict(_yaml)
    env_only = Settings()
    # UPLOADS__MAX_FILES etc. override individual keys of the YAML uploads block
    uploads = UploadConfig(**{
        **(y.pop("uploads", {}) or {}),
        **env_only.uploads.model_dump(exclude_unset=True),
    })
    overrides = {
        k: v for k, v in y.items()
        if k in Settings.model_fields and k not in env_only.model_fields_set
    }
    return Settings(uploads=uploads, **overrides)

"""Data models for usermgr."""

from usermgr_cli.models.config_models import APIConfig, AppConfig, OutputConfig
from usermgr_cli.models.user import (
    User,
    UserDraft,
    UserForm,
    ValidationResult,
    validate_draft,
)

__all__ = [
    "APIConfig",
    "AppConfig",
    "OutputConfig",
    "User",
    "UserDraft",
    "UserForm",
    "ValidationResult",
    "validate_draft",
]

# booknet/config.py
import logging
import os
from dataclasses import dataclass, field
from enum import Enum
from typing import List


class ApprovalGuard(str, Enum):
    """Who may approve the return of a borrowed book.

    LEGACY keeps the historical check, which rejects the book owner just like
    return_book does. OWNER requires the acting user to be the book owner.
    """
    LEGACY = "legacy"
    OWNER = "owner"


def _split_origins(value: str) -> List[str]:
    return [origin.strip() for origin in value.split(",") if origin.strip()]


def _approval_guard_from_env() -> ApprovalGuard:
    value = os.getenv("BOOKNET_APPROVAL_GUARD", ApprovalGuard.LEGACY.value)
    try:
        return ApprovalGuard(value.strip().lower())
    except ValueError:
        choices = ", ".join(guard.value for guard in ApprovalGuard)
        raise ValueError(f"Invalid BOOKNET_APPROVAL_GUARD {value!r}; expected one of: {choices}") from None


@dataclass
class Settings:
    database_url: str = field(default_factory=lambda: os.getenv("DATABASE_URL", "sqlite:///books.db"))
    approval_guard: ApprovalGuard = field(default_factory=_approval_guard_from_env)
    log_level: str = field(default_factory=lambda: os.getenv("BOOKNET_LOG_LEVEL", "INFO").upper())
    cors_origins: List[str] = field(
        default_factory=lambda: _split_origins(
            os.getenv("BOOKNET_CORS_ORIGINS", "http://localhost:4200,http://localhost:5173")
        )
    )


def get_settings() -> Settings:
    """Read settings from the environment.

    Raises:
        ValueError: If an environment variable holds an unsupported value
    """
    return Settings()


def configure_logging(level: str | None = None) -> None:
    """Configure root logging for the API and CLI entry points"""
    logging.basicConfig(
        level=level or get_settings().log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

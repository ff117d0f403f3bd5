import os
from dataclasses import dataclass

from .errors import ConfigurationError


def _int_env(name: str, default: int) -> int:
    raw = os.getenv(name)
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from None


@dataclass
class Config:
    """
    Settings for one running app. Built once at startup and handed to
    create_app(); request handlers never read the environment themselves.
    """
    steam_api_key: str | None = None
    steam_id64: str | None = None
    request_timeout: int = 15
    detail_workers: int = 16
    log_level: str = "WARNING"

    @classmethod
    def from_env(cls) -> "Config":
        return cls(
            steam_api_key=os.getenv("STEAM_API_KEY") or None,
            steam_id64=os.getenv("STEAM_ID64") or None,
            request_timeout=_int_env("STEAM_REQUEST_TIMEOUT", 15),
            detail_workers=_int_env("SUGGESTER_DETAIL_WORKERS", 16),
            log_level=os.getenv("SUGGESTER_LOG_LEVEL", "WARNING"),
        )

    def require_credentials(self) -> None:
        if not self.steam_api_key or not self.steam_id64:
            raise ConfigurationError()

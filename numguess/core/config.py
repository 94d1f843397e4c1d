"""Runtime configuration, read from the environment."""

import os
from dataclasses import dataclass, field


def _env(name: str, default: str) -> str:
    return os.getenv(f"NUMGUESS_{name}", default)


@dataclass(frozen=True)
class Settings:
    title: str = field(default_factory=lambda: _env("TITLE", "Number Guessing Game"))
    # Prefix the app is served under when behind a proxy, e.g. "/numguess".
    root_path: str = field(default_factory=lambda: _env("ROOT_PATH", ""))
    log_level: str = field(default_factory=lambda: _env("LOG_LEVEL", "INFO").upper())
    host: str = field(default_factory=lambda: _env("HOST", "0.0.0.0"))
    port: int = field(default_factory=lambda: int(_env("PORT", "8080")))


def get_settings() -> Settings:
    return Settings()

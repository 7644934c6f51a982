# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Configuration helpers for prodcheck."""

import os
from dataclasses import dataclass, field

from .version import __version__

DEFAULT_USER_AGENT = f"prodcheck/{__version__}"
DEFAULT_HOST = "localhost"
DEFAULT_PORT = 3123
DEFAULT_STARTUP_DELAY = 1.0


class HarnessConfigError(ValueError):
    """Raised for configuration that makes a run impossible (before any probe is issued)."""


def _float_env(name: str, default: float) -> float:
    try:
        value = os.getenv(name)
        return float(value) if value is not None else default
    except ValueError:
        return default


def _int_env(name: str, default: int) -> int:
    try:
        value = os.getenv(name)
        return int(value) if value is not None else default
    except ValueError:
        return default


def _bool_env(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


def _optional_float_env(name: str, default: float | None) -> float | None:
    try:
        value = os.getenv(name)
        if value is None or not value.strip():
            return default
        parsed = float(value)
        return parsed if parsed > 0 else None
    except ValueError:
        return default


@dataclass(frozen=True)
class FormatSettings:
    """ANSI colour table used by the console reporter."""

    green: str = "\x1b[32m"
    red: str = "\x1b[31m"
    yellow: str = "\x1b[33m"
    reset: str = "\x1b[0m"

    @classmethod
    def plain(cls) -> "FormatSettings":
        return cls(green="", red="", yellow="", reset="")


@dataclass
class HarnessSettings:
    """Run settings for a smoke-test pass against a local service."""

    host: str = DEFAULT_HOST
    port: int = DEFAULT_PORT
    startup_delay: float = DEFAULT_STARTUP_DELAY
    # None waits indefinitely for the service to answer.
    timeout: float | None = None
    user_agent: str = DEFAULT_USER_AGENT
    allow_redirects: bool = False
    max_body_bytes: int = 16 * 1024 * 1024
    ffmpeg_path: str = "ffmpeg"
    ffprobe_path: str = "ffprobe"
    color: bool = True
    formatting: FormatSettings = field(default_factory=FormatSettings)

    @property
    def base_url(self) -> str:
        return f"http://{self.host}:{self.port}"

    def validate(self) -> "HarnessSettings":
        if not 0 < self.port < 65536:
            raise HarnessConfigError(f"port must be between 1 and 65535, got {self.port}")
        if self.startup_delay < 0:
            raise HarnessConfigError(f"startup delay must not be negative, got {self.startup_delay}")
        return self

    def format_table(self) -> FormatSettings:
        return self.formatting if self.color else FormatSettings.plain()

    @classmethod
    def from_env(cls) -> "HarnessSettings":
        """Create settings from environment variables (evaluated at call time)."""
        max_body_bytes = _int_env("PRODCHECK_HTTP_MAX_BODY_BYTES", cls.max_body_bytes)
        if max_body_bytes <= 0:
            max_body_bytes = cls.max_body_bytes
        return cls(
            host=os.getenv("PRODCHECK_HOST", cls.host),
            port=_int_env("PORT", cls.port),
            startup_delay=_float_env("PRODCHECK_STARTUP_DELAY", cls.startup_delay),
            timeout=_optional_float_env("PRODCHECK_HTTP_TIMEOUT", cls.timeout),
            user_agent=os.getenv("PRODCHECK_USER_AGENT", cls.user_agent),
            allow_redirects=_bool_env("PRODCHECK_HTTP_REDIRECTS", cls.allow_redirects),
            max_body_bytes=max_body_bytes,
            ffmpeg_path=os.getenv("PRODCHECK_FFMPEG_PATH", cls.ffmpeg_path),
            ffprobe_path=os.getenv("PRODCHECK_FFPROBE_PATH", cls.ffprobe_path),
            color=os.getenv("NO_COLOR") is None and _bool_env("PRODCHECK_COLOR", cls.color),
        )


def load_settings() -> HarnessSettings:
    """Load harness settings from environment with sensible defaults."""
    return HarnessSettings.from_env()

"""Application configuration management helpers."""

from __future__ import annotations

import json
import os
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any, Dict, Optional


class Environment(str, Enum):
    DEVELOPMENT = "development"
    STAGING = "staging"
    PRODUCTION = "production"


DEFAULT_BASE_URL = "https://jsonplaceholder.typicode.com"
DEFAULT_FILE_UPLOAD_URL = "https://httpbin.org/post"

POSTS_ENDPOINT = "/posts"
USERS_ENDPOINT = "/users"


def post_endpoint(post_id: int) -> str:
    return f"{POSTS_ENDPOINT}/{post_id}"


def user_endpoint(user_id: int) -> str:
    return f"{USERS_ENDPOINT}/{user_id}"


def post_comments_endpoint(post_id: int) -> str:
    return f"{POSTS_ENDPOINT}/{post_id}/comments"


def _str_to_bool(value: str | None, default: bool) -> bool:
    if value is None:
        return default
    value = value.strip().lower()
    if value in {"1", "true", "yes", "on"}:
        return True
    if value in {"0", "false", "no", "off"}:
        return False
    return default


def _str_to_int(value: str | None, default: int) -> int:
    if value is None:
        return default
    try:
        return int(value)
    except ValueError as exc:
        raise ValueError(f"Invalid integer value: {value}") from exc


def _str_to_float(value: str | None, default: float) -> float:
    if value is None:
        return default
    try:
        return float(value)
    except ValueError as exc:
        raise ValueError(f"Invalid float value: {value}") from exc


@dataclass(frozen=True)
class AppConfig:
    """Immutable configuration object loaded from env or files.

    Timeouts are expressed in seconds. ``enable_logging`` defaults to the
    environment policy when left as ``None``: on for development and
    staging, off for production.
    """

    environment: Environment = Environment.DEVELOPMENT
    base_url: str = DEFAULT_BASE_URL
    file_upload_url: str = DEFAULT_FILE_UPLOAD_URL
    connect_timeout: float = 30.0
    receive_timeout: float = 30.0
    send_timeout: float = 30.0
    upload_timeout: float = 120.0
    max_file_size: int = 10 * 1024 * 1024
    max_retries: int = 3
    retry_delay: float = 1.0
    enable_logging: Optional[bool] = None
    app_version: str = "1.0.0"
    auto_load_on_init: bool = True
    enable_cache: bool = False
    cache_max_age: float = 300.0
    default_headers: Dict[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if not isinstance(self.environment, Environment):
            object.__setattr__(self, "environment", Environment(self.environment))
        if self.enable_logging is None:
            object.__setattr__(
                self,
                "enable_logging",
                self.environment is not Environment.PRODUCTION,
            )
        self.validate()

    @property
    def headers(self) -> Dict[str, str]:
        """Headers sent with every JSON request."""

        merged = {
            "Content-Type": "application/json",
            "Accept": "application/json",
            "X-App-Version": self.app_version,
        }
        merged.update(self.default_headers)
        return merged

    @classmethod
    def from_env(cls) -> "AppConfig":
        defaults = cls()
        logging_raw = os.getenv("API_LEARN_ENABLE_LOGGING")
        return cls(
            environment=Environment(
                os.getenv("API_LEARN_ENVIRONMENT", defaults.environment.value)
            ),
            base_url=os.getenv("API_LEARN_BASE_URL", defaults.base_url),
            file_upload_url=os.getenv(
                "API_LEARN_FILE_UPLOAD_URL", defaults.file_upload_url
            ),
            connect_timeout=_str_to_float(
                os.getenv("API_LEARN_CONNECT_TIMEOUT"), defaults.connect_timeout
            ),
            receive_timeout=_str_to_float(
                os.getenv("API_LEARN_RECEIVE_TIMEOUT"), defaults.receive_timeout
            ),
            send_timeout=_str_to_float(
                os.getenv("API_LEARN_SEND_TIMEOUT"), defaults.send_timeout
            ),
            upload_timeout=_str_to_float(
                os.getenv("API_LEARN_UPLOAD_TIMEOUT"), defaults.upload_timeout
            ),
            max_file_size=_str_to_int(
                os.getenv("API_LEARN_MAX_FILE_SIZE"), defaults.max_file_size
            ),
            max_retries=_str_to_int(
                os.getenv("API_LEARN_MAX_RETRIES"), defaults.max_retries
            ),
            retry_delay=_str_to_float(
                os.getenv("API_LEARN_RETRY_DELAY"), defaults.retry_delay
            ),
            enable_logging=(
                _str_to_bool(logging_raw, True) if logging_raw is not None else None
            ),
            app_version=os.getenv("API_LEARN_APP_VERSION", defaults.app_version),
            auto_load_on_init=_str_to_bool(
                os.getenv("API_LEARN_AUTO_LOAD"), defaults.auto_load_on_init
            ),
            enable_cache=_str_to_bool(
                os.getenv("API_LEARN_ENABLE_CACHE"), defaults.enable_cache
            ),
            cache_max_age=_str_to_float(
                os.getenv("API_LEARN_CACHE_MAX_AGE"), defaults.cache_max_age
            ),
        )

    @classmethod
    def from_file(cls, path: str) -> "AppConfig":
        file_path = Path(path)
        if not file_path.exists():
            raise FileNotFoundError(f"Configuration file not found: {path}")
        raw = file_path.read_text()
        data: Dict[str, Any]
        suffix = file_path.suffix.lower()
        if suffix == ".json":
            data = json.loads(raw)
        elif suffix in {".yaml", ".yml"}:
            data = cls._load_yaml(raw)
        else:
            raise ValueError("Unsupported config format. Use JSON or YAML.")
        return cls(**cls._merge_with_defaults(data))

    def validate(self) -> None:
        if not self.base_url.startswith(("http://", "https://")):
            raise ValueError("base_url must be an http(s) URL")
        if not self.file_upload_url.startswith(("http://", "https://")):
            raise ValueError("file_upload_url must be an http(s) URL")
        for name in ("connect_timeout", "receive_timeout", "send_timeout", "upload_timeout"):
            if getattr(self, name) <= 0:
                raise ValueError(f"{name} must be greater than zero")
        if self.max_file_size <= 0:
            raise ValueError("max_file_size must be greater than zero")
        if self.max_retries < 0:
            raise ValueError("max_retries must be non-negative")
        if self.retry_delay < 0:
            raise ValueError("retry_delay must be non-negative")
        if self.cache_max_age <= 0:
            raise ValueError("cache_max_age must be greater than zero")

    @classmethod
    def _merge_with_defaults(cls, data: Dict[str, Any]) -> Dict[str, Any]:
        defaults = cls()
        merged: Dict[str, Any] = {
            "environment": data.get("environment", defaults.environment.value),
            "base_url": data.get("base_url", defaults.base_url),
            "file_upload_url": data.get("file_upload_url", defaults.file_upload_url),
            "connect_timeout": data.get("connect_timeout", defaults.connect_timeout),
            "receive_timeout": data.get("receive_timeout", defaults.receive_timeout),
            "send_timeout": data.get("send_timeout", defaults.send_timeout),
            "upload_timeout": data.get("upload_timeout", defaults.upload_timeout),
            "max_file_size": data.get("max_file_size", defaults.max_file_size),
            "max_retries": data.get("max_retries", defaults.max_retries),
            "retry_delay": data.get("retry_delay", defaults.retry_delay),
            "enable_logging": data.get("enable_logging"),
            "app_version": data.get("app_version", defaults.app_version),
            "auto_load_on_init": data.get("auto_load_on_init", defaults.auto_load_on_init),
            "enable_cache": data.get("enable_cache", defaults.enable_cache),
            "cache_max_age": data.get("cache_max_age", defaults.cache_max_age),
            "default_headers": dict(data.get("default_headers", {})),
        }
        return merged

    @staticmethod
    def _load_yaml(raw: str) -> Dict[str, Any]:
        try:
            import yaml  # type: ignore
        except ImportError as exc:  # pragma: no cover - optional dependency
            raise RuntimeError("PyYAML is required to parse YAML config files") from exc
        return yaml.safe_load(raw) or {}

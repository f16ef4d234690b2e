"""Configuration loading and validation using Pydantic."""

from pathlib import Path

from pydantic import BaseModel, Field, field_validator

from webmud.domain import DEFAULT_MSG_LIMIT
from webmud.infrastructure.config import YAMLConfigLoader
from webmud.infrastructure.sanitizer import DEFAULT_ALLOWED


class TransportConfig(BaseModel):
    """Transport configuration."""

    url: str = "ws://127.0.0.1:8000/ws"
    open_timeout: float = Field(default=10.0, gt=0)

    @field_validator("url")
    @classmethod
    def validate_scheme(cls, v: str) -> str:
        """Only websocket URLs are supported."""
        if not v.startswith(("ws://", "wss://")):
            raise ValueError(f"Transport URL must use ws:// or wss://: {v}")
        return v


class OutputConfig(BaseModel):
    """Output window configuration."""

    msg_limit: int = Field(default=DEFAULT_MSG_LIMIT, ge=1)


class SanitizerConfig(BaseModel):
    """Markup allow-list: tag name -> allowed attributes."""

    allowed: dict[str, list[str]] = Field(
        default_factory=lambda: {tag: list(attrs) for tag, attrs in DEFAULT_ALLOWED.items()}
    )


class RemoteConfig(BaseModel):
    """Game server the proxy should connect to once the transport opens."""

    host: str = ""
    port: int = Field(default=23, ge=1, le=65535)
    tls: bool = False


class Config(BaseModel):
    """Application configuration."""

    transport: TransportConfig = Field(default_factory=TransportConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)
    sanitizer: SanitizerConfig = Field(default_factory=SanitizerConfig)
    remote: RemoteConfig = Field(default_factory=RemoteConfig)


def load_config(config_path: Path | str = "webmud.yaml") -> Config:
    """Load configuration from YAML file, defaults if it does not exist."""
    data = YAMLConfigLoader(config_path).load()
    return Config.model_validate(data)

"""Configuration module for utcp-bridge using pydantic-settings."""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from utcp_bridge.services.chat_orchestrator import DEFAULT_SYSTEM_PROMPT


class UtcpBridgeSettings(BaseSettings):
    """Main configuration settings for utcp-bridge.

    All settings can be overridden via environment variables with the
    UTCP_BRIDGE_ prefix. For example, UTCP_BRIDGE_OLLAMA_HOST will override
    the ollama_host setting. List and dict settings take JSON values, e.g.
    UTCP_BRIDGE_MANUAL_URLS='["http://localhost:8000/api/v1/utcp"]'.
    """

    # Server
    host: str = "127.0.0.1"
    port: int = 8000

    # Ollama
    ollama_host: str = "http://localhost:11434"
    model: str = "llama3.2:latest"
    system_prompt: str = DEFAULT_SYSTEM_PROMPT

    # UTCP discovery
    manual_urls: list[str] = Field(default_factory=list)
    rediscover_on_each_message: bool = True

    # Base URL the sample manual points its tools at
    public_base_url: str = "http://127.0.0.1:8000"

    # Values for ${name} placeholders (API keys and the like)
    variables: dict[str, str] = Field(default_factory=dict)

    # Outgoing HTTP
    http_timeout: float = 30.0
    verify_tls: bool = True

    # CORS
    cors_origins: list[str] = Field(default_factory=lambda: ["*"])

    # Logging
    log_level: str = "INFO"

    model_config = SettingsConfigDict(env_prefix="UTCP_BRIDGE_")

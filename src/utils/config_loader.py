"""
Configuration loader for the contract acceptance gateway
"""

import os
import yaml
from pathlib import Path
from typing import Any, Dict, List, Literal, Optional
from pydantic import BaseModel, Field, ValidationError
import logging

logger = logging.getLogger(__name__)

DEFAULT_WEBHOOK_URL = "https://n8n.doorbinwaste.com/webhook/consultar-cotizacion"


class WebhookConfig(BaseModel):
    """Upstream automation webhook configuration"""

    url: str = DEFAULT_WEBHOOK_URL
    fetch_timeout_seconds: float = Field(default=10.0, gt=0, le=120)
    submit_timeout_seconds: float = Field(default=15.0, gt=0, le=120)
    user_agent: str = "Mozilla/5.0 (Windows NT 10.0; Win64; x64) " "AppleWebKit/537.36 (KHTML, like Gecko) " "Chrome/120.0.0.0 Safari/537.36"


class ServerConfig(BaseModel):
    """HTTP server configuration"""

    host: str = "0.0.0.0"
    port: int = Field(default=3000, ge=1, le=65535)
    environment: Literal["development", "production"] = "development"
    cors_allow_origins: List[str] = Field(default_factory=lambda: ["*"])

    @property
    def is_production(self) -> bool:
        return self.environment == "production"


class IntegrationsConfig(BaseModel):
    """Selects the real webhook client or the in-memory mock"""

    mode: Literal["real", "mock"] = "real"


class GatewayConfig(BaseModel):
    """Complete gateway configuration"""

    webhook: WebhookConfig = Field(default_factory=WebhookConfig)
    server: ServerConfig = Field(default_factory=ServerConfig)
    integrations: IntegrationsConfig = Field(default_factory=IntegrationsConfig)


# env var -> (section, key)
_ENV_OVERRIDES = {
    "WEBHOOK_URL": ("webhook", "url"),
    "WEBHOOK_FETCH_TIMEOUT_SECONDS": ("webhook", "fetch_timeout_seconds"),
    "WEBHOOK_SUBMIT_TIMEOUT_SECONDS": ("webhook", "submit_timeout_seconds"),
    "APP_ENV": ("server", "environment"),
    "PORT": ("server", "port"),
    "INTEGRATIONS_MODE": ("integrations", "mode"),
}


def _apply_env_overrides(data: Dict[str, Any], environ: Dict[str, str]) -> Dict[str, Any]:
    for env_name, (section, key) in _ENV_OVERRIDES.items():
        value = (environ.get(env_name) or "").strip()
        if not value:
            continue
        if env_name in ("APP_ENV", "INTEGRATIONS_MODE"):
            value = value.lower()
        section_data = data.get(section) or {}
        data[section] = section_data
        section_data[key] = value

    origins = (environ.get("CORS_ALLOW_ORIGINS") or "").strip()
    if origins:
        server = data.get("server") or {}
        data["server"] = server
        server["cors_allow_origins"] = [o.strip() for o in origins.split(",") if o.strip()]
    return data


def load_gateway_config(config_path: Optional[Path] = None, environ: Optional[Dict[str, str]] = None) -> GatewayConfig:
    """
    Load and validate gateway configuration from YAML file plus environment overrides

    Args:
        config_path: Path to config file. Defaults to config/gateway_config.yml
        environ: Environment mapping used for overrides. Defaults to os.environ

    Returns:
        Validated GatewayConfig object

    Raises:
        FileNotFoundError: If config file doesn't exist
        ValidationError: If config doesn't match schema
    """
    if config_path is None:
        config_path = Path(__file__).parent.parent.parent / "config" / "gateway_config.yml"

    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(config_path, "r", encoding="utf-8") as f:
        config_data = yaml.safe_load(f) or {}

    config_data = _apply_env_overrides(config_data, dict(os.environ) if environ is None else environ)

    try:
        config = GatewayConfig(**config_data)
        logger.info("Successfully loaded gateway config from %s", config_path)
        return config
    except ValidationError as e:
        logger.error("Gateway config validation failed: %s", e)
        raise

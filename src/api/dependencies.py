import logging
from typing import Optional

from dotenv import load_dotenv

from src.integrations.clients.mocks.webhook import MockWebhookClient
from src.integrations.clients.real_http.webhook import WebhookClient
from src.integrations.policy.contract_gateway import ContractGateway
from src.utils.config_loader import GatewayConfig, load_gateway_config

load_dotenv()

logger = logging.getLogger(__name__)

# Set by main.py at startup; tests override get_gateway instead.
gateway_config: Optional[GatewayConfig] = None
_gateway: Optional[ContractGateway] = None


def get_config() -> GatewayConfig:
    global gateway_config
    if gateway_config is None:
        gateway_config = load_gateway_config()
    return gateway_config


def _select_webhook_client(config: GatewayConfig):
    if config.integrations.mode == "mock":
        logger.warning("INTEGRATIONS_MODE=mock: contract webhook calls are served by MockWebhookClient")
        return MockWebhookClient()
    return WebhookClient(config.webhook)


def build_gateway(config: GatewayConfig) -> ContractGateway:
    return ContractGateway(_select_webhook_client(config))


def get_gateway() -> ContractGateway:
    global _gateway
    if _gateway is None:
        _gateway = build_gateway(get_config())
    return _gateway

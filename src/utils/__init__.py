"""
Utility modules for the contract acceptance gateway
"""
from .config_loader import GatewayConfig, load_gateway_config

__all__ = [
    'GatewayConfig',
    'load_gateway_config',
]

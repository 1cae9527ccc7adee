# Infrastructure module - Logging and configuration
# Nothing here touches the network

from .config import (
    ConfigManager, ConfigError, ClientConfig, load_client_config,
    BASE_URL, DEFAULT_USER_AGENT,
)
from .logging import (
    get_logger, configure_logging, reset_logging,
    RequestContext, get_request_id, generate_request_id,
)

__all__ = [
    # Config
    "ConfigManager",
    "ConfigError",
    "ClientConfig",
    "load_client_config",
    "BASE_URL",
    "DEFAULT_USER_AGENT",
    # Logging
    "get_logger",
    "configure_logging",
    "reset_logging",
    "RequestContext",
    "get_request_id",
    "generate_request_id",
]

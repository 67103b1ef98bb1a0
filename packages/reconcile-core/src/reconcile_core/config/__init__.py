from .loader import DEFAULT_CONFIG_TEMPLATE, load_config, resolve_api_key
from .models import ClientSettings, LookupSettings, ReconcileConfig

__all__ = [
    "ClientSettings",
    "DEFAULT_CONFIG_TEMPLATE",
    "LookupSettings",
    "ReconcileConfig",
    "load_config",
    "resolve_api_key",
]

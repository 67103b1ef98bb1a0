"""Locate, read and validate the reconcile YAML config.

Lookup order: an explicit path, the file named by ``$RECONCILE_CONFIG``,
``./reconcile.yaml``, then ``~/.reconcile/config.yaml``. The first file with
content wins; with none, every setting takes its default.
"""

import logging
import os
import re
from pathlib import Path

import yaml
from pydantic import ValidationError

from .models import ReconcileConfig

logger = logging.getLogger(__name__)

CONFIG_ENV_VAR = "RECONCILE_CONFIG"

# ${VAR} or ${VAR:-fallback}
_ENV_REF = re.compile(r"\$\{(\w+)(?::-([^}]*))?\}")


def config_search_path(cli_path: str | None = None) -> list[Path]:
    """Candidate config files in the order they are tried."""
    paths = []
    if cli_path:
        paths.append(Path(cli_path))
    if os.environ.get(CONFIG_ENV_VAR):
        paths.append(Path(os.environ[CONFIG_ENV_VAR]))
    paths.append(Path("./reconcile.yaml"))
    paths.append(Path.home() / ".reconcile" / "config.yaml")
    return paths


def load_config(cli_path: str | None = None) -> ReconcileConfig:
    for path in config_search_path(cli_path):
        if not path.exists():
            continue
        raw = _read_yaml(path)
        if raw is None:
            logger.debug("config %s is empty, trying next location", path)
            continue
        try:
            config = ReconcileConfig(**_expand_env_vars(raw))
        except ValidationError as e:
            raise ValueError(f"Invalid config in {path}: {e}") from e
        logger.debug("loaded config from %s", path)
        return config

    return ReconcileConfig()


def resolve_api_key(config: ReconcileConfig) -> str:
    """Read the API key from the env var the client settings name."""
    name = config.client.api_key_env
    key = os.environ.get(name, "").strip()
    if not key:
        raise ValueError(f"API key env var {name} is not set")
    return key


def _read_yaml(path: Path) -> object:
    try:
        with open(path) as f:
            return yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid YAML in {path}: {e}") from e


def _expand_env_vars(obj: object) -> object:
    """Recursively expand ${VAR} and ${VAR:-fallback} references in strings."""
    if isinstance(obj, str):
        return _ENV_REF.sub(lambda m: os.environ.get(m.group(1)) or (m.group(2) or ""), obj)
    elif isinstance(obj, dict):
        return {k: _expand_env_vars(v) for k, v in obj.items()}
    elif isinstance(obj, list):
        return [_expand_env_vars(v) for v in obj]
    return obj


DEFAULT_CONFIG_TEMPLATE = """\
# reconcile.yaml

# Remote API
client:
  api_url: "${BRAINTRUST_API_URL:-https://api.braintrust.dev}"
  api_key_env: "BRAINTRUST_API_KEY"
  # org_name: "my-org"
  # org_id: "..."              # default org for organization resources
  timeout: 60

# Name-based lookups
lookup:
  name_lookup_limit: 2         # must be >= 2 to detect ambiguous names

# Logging
log_level: "info"              # debug | info | warn | error
log_format: "text"             # text | json
"""

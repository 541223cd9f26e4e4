"""Process-level settings and well-known locations."""

import os

REGISTRY_URL_ENV_VAR = "SIDEKIT_REGISTRY_URL"
DEFAULT_REGISTRY_URL = "https://raw.githubusercontent.com/kerwanp/sidekit/refs/heads/main/registry"

CONFIG_SCHEMA_URL = (
    "https://raw.githubusercontent.com/kerwanp/sidekit/refs/heads/main/schemas/config.json"
)
KIT_SCHEMA_URL = "https://raw.githubusercontent.com/kerwanp/sidekit/refs/heads/main/schemas/kit.json"

SIDEKIT_DIR = ".sidekit"
CONFIG_FILENAME = "config.json"
KIT_FILENAME = "sidekit.json"
RULES_DIR = "rules"
REGISTRY_INDEX_FILENAME = "registry.json"


def get_registry_url() -> str:
    """Return the registry base URL, honoring the SIDEKIT_REGISTRY_URL override."""
    value = os.environ.get(REGISTRY_URL_ENV_VAR, "").strip()
    if not value:
        return DEFAULT_REGISTRY_URL
    return value.rstrip("/")

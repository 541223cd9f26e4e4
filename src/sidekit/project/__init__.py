"""Project-level state: configuration and initialization."""

from sidekit.project.config_store import add_config_refs, load_config, update_config
from sidekit.project.init import init_sidekit

__all__ = ["add_config_refs", "init_sidekit", "load_config", "update_config"]

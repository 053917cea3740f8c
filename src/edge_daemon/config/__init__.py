"""Layered daemon configuration: embedded defaults, optional file, typed settings."""

from edge_daemon.config.defaults import DEFAULTS, default_document
from edge_daemon.config.interfaces import ConfigLoader
from edge_daemon.config.loader import (
    YamlConfigLoader,
    deep_merge,
    dump_settings,
    load_settings,
    merge_over_defaults,
)
from edge_daemon.config.models import (
    ConfigLoadRequest,
    DpsProvisioning,
    ManualProvisioning,
    ModuleSpec,
    Provisioning,
    Settings,
)

__all__ = [
    "DEFAULTS",
    "ConfigLoadRequest",
    "ConfigLoader",
    "DpsProvisioning",
    "ManualProvisioning",
    "ModuleSpec",
    "Provisioning",
    "Settings",
    "YamlConfigLoader",
    "deep_merge",
    "default_document",
    "dump_settings",
    "load_settings",
    "merge_over_defaults",
]

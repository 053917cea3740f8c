from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Any, Generic, Mapping, MutableMapping, Optional, Type, TypeVar, Union

import yaml
from pydantic import ValidationError

from edge_daemon.config.defaults import default_document
from edge_daemon.config.models import ConfigLoadRequest, Settings
from edge_daemon.errors import ConfigurationError

logger = logging.getLogger(__name__)

ConfigT = TypeVar("ConfigT")

PathLike = Union[str, os.PathLike]

# Tried in order when an extension-less config path does not exist.
_FALLBACK_SUFFIXES = (".yaml", ".yml", ".json")

# Sections holding a tagged union, keyed by their discriminant field.
_TAGGED_SECTIONS = {"provisioning": "source"}


def deep_merge(base: MutableMapping[str, Any], override: Mapping[str, Any]) -> None:
    """
    Merge `override` into `base` in place.

    Mappings are merged key by key at every depth. Any other value, lists included,
    replaces the base value as a whole.
    """
    for k, v in override.items():
        if isinstance(v, Mapping) and isinstance(base.get(k), Mapping):
            deep_merge(base[k], v)  # type: ignore[arg-type]
            continue
        base[k] = v


def merge_over_defaults(defaults: MutableMapping[str, Any], override: Mapping[str, Any]) -> None:
    """
    Deep merge a config file over the default document.

    A tagged section whose tag the file changes is replaced rather than merged, so the
    fields of the default variant do not leak into the new one.
    """
    for section, tag in _TAGGED_SECTIONS.items():
        new_section = override.get(section)
        old_section = defaults.get(section)
        if not isinstance(new_section, Mapping) or not isinstance(old_section, Mapping):
            continue
        if tag in new_section and new_section[tag] != old_section.get(tag):
            defaults[section] = {}
    deep_merge(defaults, override)


def _parse_document(raw: str, source: str) -> dict[str, Any]:
    try:
        data = yaml.safe_load(raw)
    except yaml.YAMLError as e:
        raise ConfigurationError(f"Config file is not valid YAML: {source}", path=source) from e
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigurationError(
            f"Top-level YAML must be a mapping, got: {type(data).__name__} ({source})", path=source
        )
    return data


def _resolve_config_path(path: Path) -> Path:
    if path.exists() or path.suffix:
        return path
    for suffix in _FALLBACK_SUFFIXES:
        candidate = path.with_suffix(suffix)
        if candidate.exists():
            return candidate
    return path


def read_document(path: PathLike) -> dict[str, Any]:
    resolved = _resolve_config_path(Path(path))
    try:
        with resolved.open("r", encoding="utf-8") as f:
            raw = f.read()
    except FileNotFoundError as e:
        raise ConfigurationError(f"Config file not found: {resolved}", path=str(resolved)) from e
    except OSError as e:
        raise ConfigurationError(f"Config file could not be read: {resolved}", path=str(resolved)) from e
    except UnicodeDecodeError as e:
        raise ConfigurationError(f"Config file is not valid UTF-8: {resolved}", path=str(resolved)) from e
    return _parse_document(raw, str(resolved))


def default_settings_document() -> dict[str, Any]:
    """Parse the embedded defaults. A failure here is a build defect, not a user error."""
    try:
        data = yaml.safe_load(default_document())
    except yaml.YAMLError as e:
        raise RuntimeError("Invalid default configuration") from e
    if not isinstance(data, dict):
        raise RuntimeError("Invalid default configuration")
    return data


def _describe_validation_error(error: ValidationError) -> str:
    problems = []
    for item in error.errors():
        loc = ".".join(str(p) for p in item["loc"]) or "<root>"
        problems.append(f"{loc}: {item['msg']}")
    return "; ".join(problems)


class YamlConfigLoader(Generic[ConfigT]):
    """
    Builds Settings[config_type] from the embedded defaults and an optional YAML/JSON file.

    Every failure is reported as ConfigurationError, except a broken embedded default document
    which raises RuntimeError.
    """

    def __init__(self, config_type: Type[ConfigT]) -> None:
        self._settings_type = Settings[config_type]  # type: ignore[valid-type]

    def load(self, request: ConfigLoadRequest = ConfigLoadRequest()) -> Settings[ConfigT]:
        document = default_settings_document()

        if request.path is None:
            logger.debug("No config file given, using embedded defaults.")
            try:
                settings = self._settings_type.model_validate(document)
            except ValidationError as e:
                raise RuntimeError("Invalid default configuration") from e
            self._log_loaded(settings)
            return settings

        logger.debug("Merging config file over defaults. path=%s", request.path)
        merge_over_defaults(document, read_document(request.path))

        logger.debug("Decoding merged configuration.")
        try:
            settings = self._settings_type.model_validate(document)
        except ValidationError as e:
            raise ConfigurationError(
                f"Invalid configuration ({request.path}): {_describe_validation_error(e)}", path=request.path
            ) from e
        self._log_loaded(settings)
        return settings

    @staticmethod
    def _log_loaded(settings: Settings[Any]) -> None:
        logger.info(
            "Configuration loaded. provisioning=%s hostname=%s runtime=%s docker_uri=%s",
            settings.provisioning.source,
            settings.hostname,
            settings.runtime.name,
            settings.docker_uri,
        )


def load_settings(config_type: Type[ConfigT], path: Optional[PathLike] = None) -> Settings[ConfigT]:
    """Load settings from the defaults, merged with the file at `path` when one is given."""
    request = ConfigLoadRequest(path=None if path is None else os.fspath(path))
    return YamlConfigLoader(config_type).load(request)


def dump_settings(settings: Settings[Any], fmt: str = "yaml") -> str:
    data = settings.model_dump(mode="json")
    if fmt == "json":
        return json.dumps(data, indent=2) + "\n"
    if fmt == "yaml":
        return yaml.safe_dump(data, sort_keys=False)
    raise ValueError(f"Unsupported output format: {fmt}")

"""Configuration loading for the servers.com collection generator."""

from pathlib import Path
from typing import Any, cast

import yaml

from .exceptions import ConfigurationError, InvalidDescriptorError
from .generator import default_output_name
from .models import CollectionDescriptor, CollectionTarget

DEFAULT_CONFIG_PATH = Path(__file__).parent / "config.yaml"

REQUIRED_KEYS = ("name", "path", "entity")
OPTIONAL_KEYS = ("plural_name", "var_prefix", "api_url", "args", "params", "output")


def load_config(config_path: Path = DEFAULT_CONFIG_PATH) -> dict[str, Any]:
    """Load the generator configuration file."""
    try:
        with open(config_path, encoding="utf-8") as f:
            config = yaml.safe_load(f)
    except (OSError, yaml.YAMLError) as e:
        raise ConfigurationError(str(config_path), e) from e

    if not isinstance(config, dict):
        raise ConfigurationError(str(config_path), ValueError("top level must be a mapping"))
    general = config.get("general") or {}
    if not isinstance(general, dict):
        raise ConfigurationError(str(config_path), ValueError("'general' must be a mapping"))
    return cast(dict[str, Any], config)


def _typed_mapping(entry: dict[str, Any], key: str, collection: str) -> dict[str, str]:
    value = entry.get(key) or {}
    if not isinstance(value, dict):
        raise InvalidDescriptorError(f"'{key}' must be a mapping of name to type", collection=collection)
    return {str(name): str(value_type) for name, value_type in value.items()}


def _optional_str(entry: dict[str, Any], key: str, collection: str) -> str | None:
    value = entry.get(key)
    if value is not None and not isinstance(value, str):
        raise InvalidDescriptorError(f"'{key}' must be a string, got {type(value).__name__}", collection=collection)
    return value


def descriptor_from_config(entry: dict[str, Any]) -> CollectionDescriptor:
    """Build a descriptor from one ``collections`` entry."""
    collection = str(entry.get("name") or "<unnamed>")

    missing = [key for key in REQUIRED_KEYS if key not in entry]
    if missing:
        raise InvalidDescriptorError(f"missing required key(s): {', '.join(missing)}", collection=collection)

    unknown = sorted(set(entry) - set(REQUIRED_KEYS) - set(OPTIONAL_KEYS))
    if unknown:
        raise InvalidDescriptorError(f"unknown key(s): {', '.join(unknown)}", collection=collection)

    path = entry["path"]
    if not isinstance(path, str):
        raise InvalidDescriptorError(f"'path' must be a string, got {type(path).__name__}", collection=collection)

    return CollectionDescriptor(
        name=_optional_str(entry, "name", collection) or "",
        path=path,
        entity=_optional_str(entry, "entity", collection) or "",
        plural_name=_optional_str(entry, "plural_name", collection),
        var_prefix=_optional_str(entry, "var_prefix", collection),
        api_url=_optional_str(entry, "api_url", collection),
        args=_typed_mapping(entry, "args", collection),
        params=_typed_mapping(entry, "params", collection),
    )


def load_collections(config: dict[str, Any]) -> list[CollectionTarget]:
    """Turn the ``collections`` table into descriptor/output pairs, in file order."""
    entries = config.get("collections") or []
    if not isinstance(entries, list):
        raise InvalidDescriptorError("'collections' must be a list")

    targets = []
    for entry in entries:
        if not isinstance(entry, dict):
            raise InvalidDescriptorError(f"collection entry must be a mapping, got {type(entry).__name__}")
        descriptor = descriptor_from_config(entry)
        output = _optional_str(entry, "output", descriptor.name) or default_output_name(descriptor)
        targets.append(CollectionTarget(descriptor=descriptor, output=output))
    return targets

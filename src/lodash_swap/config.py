"""
Rewriter configuration.

Defaults describe the lodash → es-toolkit/compat swap, so an engine can be
built with no configuration at all. A YAML file may override any field:

    legacy_module: lodash
    legacy_aliases: [lodash-es]
    replacement_module: es-toolkit/compat
    subpath_extensions: [.js, .mjs, .cjs]
    extra_supported: []
    excluded: [debounce]

Serialization goes through an explicit dict representation, mirroring the
rest of the package.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List

import yaml

from lodash_swap.errors import ConfigError


@dataclass
class RewriteConfig:
    """
    Properties:
        legacy_module: Root module name of the legacy library; also the
            fast-path needle (sources not containing it are skipped)
        legacy_aliases: Alternate spellings of the root module. Only used by
            the namespace, named-list and subpath shapes
        replacement_module: Specifier emitted in rewritten imports
        subpath_extensions: File extensions allowed after `lodash/<name>`
        extra_supported: Names treated as supported in addition to the
            bundled export list
        excluded: Names removed from the bundled export list
    """

    legacy_module: str = "lodash"
    legacy_aliases: List[str] = field(default_factory=lambda: ["lodash-es"])
    replacement_module: str = "es-toolkit/compat"
    subpath_extensions: List[str] = field(default_factory=lambda: [".js", ".mjs", ".cjs"])
    extra_supported: List[str] = field(default_factory=list)
    excluded: List[str] = field(default_factory=list)

    @property
    def root_specifiers(self) -> List[str]:
        return [self.legacy_module] + list(self.legacy_aliases)


_FIELDS = (
    "legacy_module",
    "legacy_aliases",
    "replacement_module",
    "subpath_extensions",
    "extra_supported",
    "excluded",
)
_LIST_FIELDS = ("legacy_aliases", "subpath_extensions", "extra_supported", "excluded")


def config_to_dict(config: RewriteConfig) -> Dict[str, Any]:
    return {name: getattr(config, name) for name in _FIELDS}


def config_from_dict(d: Dict[str, Any] | None) -> RewriteConfig:
    """
    Build a RewriteConfig from a plain dict; missing keys keep their defaults.

    Raises:
        ConfigError: On unknown keys or wrongly-typed values
    """
    if d is None:
        return RewriteConfig()
    if not isinstance(d, dict):
        raise ConfigError(f"Configuration must be a mapping, got {type(d).__name__}")

    unknown = sorted(set(d) - set(_FIELDS))
    if unknown:
        raise ConfigError(f"Unknown configuration keys: {unknown}")

    for name in _LIST_FIELDS:
        if name in d and not (
            isinstance(d[name], list) and all(isinstance(v, str) for v in d[name])
        ):
            raise ConfigError(f"'{name}' must be a list of strings")

    for name in ("legacy_module", "replacement_module"):
        if name in d and (not isinstance(d[name], str) or not d[name].strip()):
            raise ConfigError(f"'{name}' must be a non-empty string")

    return RewriteConfig(**d)


def config_to_yaml(config: RewriteConfig) -> str:
    return yaml.safe_dump(config_to_dict(config), sort_keys=False)


def config_from_yaml(text: str) -> RewriteConfig:
    try:
        d = yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML configuration: {e}")
    return config_from_dict(d)


def load_config(filepath: str) -> RewriteConfig:
    """
    Load a RewriteConfig from a YAML file.

    Raises:
        FileNotFoundError: If the file doesn't exist
        ConfigError: If the contents are invalid
    """
    try:
        with open(filepath, "r", encoding="utf-8") as f:
            content = f.read()
    except FileNotFoundError:
        raise FileNotFoundError(f"Config file not found: {filepath}")

    return config_from_yaml(content)


__all__ = [
    "RewriteConfig",
    "config_to_dict",
    "config_from_dict",
    "config_to_yaml",
    "config_from_yaml",
    "load_config",
]

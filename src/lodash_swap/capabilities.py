"""
Capability Registry: which lodash functions es-toolkit/compat can replace.

The registry is built once per rewriter from a static export list and is
read-only afterwards. Lookups never raise; an unknown name is simply
unsupported.
"""
from __future__ import annotations

from importlib import resources
from typing import Dict, FrozenSet, Iterable, List, Optional

import yaml

from lodash_swap.config import RewriteConfig
from lodash_swap.errors import ConfigError

EXPORTS_RESOURCE = "compat_exports.yaml"


def load_export_list(text: str | None = None) -> List[str]:
    """
    Read the es-toolkit/compat export list.

    Args:
        text: YAML document to read instead of the bundled list

    Returns:
        Export names in file order
    """
    if text is None:
        text = resources.files("lodash_swap").joinpath("data").joinpath(EXPORTS_RESOURCE).read_text(encoding="utf-8")

    d = yaml.safe_load(text)
    exports = d.get("exports") if isinstance(d, dict) else None
    if not isinstance(exports, list) or not all(isinstance(name, str) for name in exports):
        raise ConfigError("Export list must contain an 'exports' list of names")
    return exports


class CapabilityRegistry:
    """
    Immutable set of replaceable function names.

    Alongside the set, a standalone-package index maps the lowercase form of
    each name to its canonical spelling, since standalone packages are
    published lowercase (`lodash.isequal` → `isEqual`). If two names lowercase
    to the same key, the one listed last wins.
    """

    def __init__(self, names: Iterable[str]):
        names = list(names)
        self._names: FrozenSet[str] = frozenset(names)
        index: Dict[str, str] = {}
        for name in names:
            index[name.lower()] = name
        self._standalone_index = index

    @classmethod
    def from_config(cls, config: RewriteConfig, export_list: Optional[List[str]] = None) -> "CapabilityRegistry":
        """Bundled export list, plus `extra_supported`, minus `excluded`."""
        names = list(export_list) if export_list is not None else load_export_list()
        names.extend(config.extra_supported)
        excluded = set(config.excluded)
        return cls([name for name in names if name not in excluded])

    @property
    def names(self) -> FrozenSet[str]:
        return self._names

    def __len__(self) -> int:
        return len(self._names)

    def __contains__(self, name: str) -> bool:
        return self.is_supported(name)

    def is_supported(self, name: str) -> bool:
        return name in self._names

    def is_unsupported(self, name: str) -> bool:
        return not self.is_supported(name)

    def is_unsupported_standalone_package(self, lowercase_name: str) -> bool:
        return lowercase_name not in self._standalone_index

    def resolve_standalone_name(self, lowercase_name: str) -> Optional[str]:
        return self._standalone_index.get(lowercase_name)


__all__ = ["CapabilityRegistry", "load_export_list"]

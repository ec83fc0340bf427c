"""
Core data objects of the import rewriter.

These are plain data classes:
    - NamedImport (one entry of `{ a, b as c }`)
    - ImportMatch (one recognized import declaration in the source text)
    - TransformResult (what the host pipeline receives)

They carry no matching or rendering behavior of their own.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Optional


class ImportShape(Enum):
    """The import declaration shapes the rewriter recognizes, in matcher order."""
    DEFAULT = "default"            # import _ from 'lodash'
    NAMESPACE = "namespace"        # import * as _ from 'lodash'
    NAMED_LIST = "named_list"      # import { a, b as c } from 'lodash'
    SUBPATH = "subpath"            # import isEqual from 'lodash/isEqual'
    STANDALONE = "standalone"      # import get from 'lodash.get'


@dataclass(frozen=True)
class NamedImport:
    """
    A single imported binding.

    Properties:
        actual_name: Name exported by the module (never empty)
        local_name: Name bound in the importing file; equals actual_name
            when there is no `as` clause
    """

    actual_name: str
    local_name: str = ""

    def __post_init__(self):
        if not self.actual_name:
            raise ValueError("NamedImport.actual_name must be non-empty")
        if not self.local_name:
            object.__setattr__(self, "local_name", self.actual_name)

    @property
    def is_renamed(self) -> bool:
        return self.local_name != self.actual_name


@dataclass
class ImportMatch:
    """
    One occurrence of a recognized import shape.

    Lives only for the duration of one matcher pass.

    Properties:
        shape: Which of the five shapes matched
        text: Exact matched span (left untouched when nothing is replaced)
        binding: Bound identifier (default/namespace/subpath/standalone)
        specifier: Module specifier without quotes ("lodash", "lodash-es", ...)
        subpath: Function name after `/` or `.` (subpath/standalone only)
        raw_list: Unparsed `{ ... }` contents (named-list only)
    """

    shape: ImportShape
    text: str
    specifier: str
    binding: Optional[str] = None
    subpath: Optional[str] = None
    raw_list: Optional[str] = None


@dataclass(frozen=True)
class TransformResult:
    """
    Result handed back to the host pipeline.

    `map` is always an explicit None: no source map information is produced.
    Cache hits return the stored instance, so it cannot be modified.
    """

    code: str
    map: Optional[Any] = field(default=None)

    def changed(self, original: str) -> bool:
        return self.code != original

    def to_dict(self) -> Dict[str, Any]:
        return {"code": self.code, "map": None}


__all__ = [
    "ImportShape",
    "NamedImport",
    "ImportMatch",
    "TransformResult",
]

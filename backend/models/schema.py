from dataclasses import dataclass, field
from typing import Callable, Dict, Mapping, Optional, Tuple

from backend.utils.errors import ErrorKind


@dataclass(frozen=True)
class FieldRule:
    """One entry of an entity's validation table.

    ``check`` receives the trimmed field value (``None`` when absent) and
    returns True when the value is acceptable.
    """

    field: str
    kind: ErrorKind
    message: str
    check: Callable[[Optional[str]], bool]


@dataclass(frozen=True)
class EntitySchema:
    name: str
    fields: Tuple[str, ...]
    rules: Tuple[FieldRule, ...] = ()
    defaults: Mapping[str, str] = field(default_factory=dict)
    sample_input: Mapping[str, str] = field(default_factory=dict)

    def with_defaults(self, entity: Mapping[str, str]) -> Dict[str, str]:
        """Fill in create-time defaults for the fields the client left out."""
        return {**self.defaults, **entity}

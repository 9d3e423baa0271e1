from dataclasses import dataclass, field
from typing import Any, Dict


class AuthenticationError(Exception):
    """Raised by identity verifiers when a token cannot be trusted."""


@dataclass(frozen=True)
class Identity:
    uid: str
    claims: Dict[str, Any] = field(default_factory=dict)

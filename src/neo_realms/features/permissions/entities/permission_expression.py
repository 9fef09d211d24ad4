"""Permission expression value object.

A permission string such as ``"newsletter:edit,delete:13"`` is split on
``:`` into ordered positions and each position on ``,`` into alternative
sub-parts. The ``*`` token matches anything at its position.
"""

from dataclasses import dataclass, field
from functools import lru_cache
from typing import FrozenSet, Tuple

from ....config.constants import PermissionTokens

_WILDCARD_PART: FrozenSet[str] = frozenset({PermissionTokens.WILDCARD})


@dataclass(frozen=True)
class PermissionExpression:
    """Immutable, structurally comparable permission expression."""

    parts: Tuple[FrozenSet[str], ...]
    raw: str = field(default="", compare=False)

    @classmethod
    def parse(cls, text: str) -> "PermissionExpression":
        """Parse a permission string. Never fails on malformed input.

        Args:
            text: Permission string in ``part:part,subpart:*`` form

        Returns:
            Parsed expression; an empty string yields the global wildcard
        """
        text = (text or "").strip()
        if not text:
            return cls(parts=(_WILDCARD_PART,), raw=text)

        parts = tuple(
            frozenset(
                sub_part.strip()
                for sub_part in part.split(PermissionTokens.SUBPART_DIVIDER)
            )
            for part in text.split(PermissionTokens.PART_DIVIDER)
        )
        return cls(parts=parts, raw=text)

    @property
    def is_wildcard(self) -> bool:
        """True when every position is the wildcard, i.e. it grants everything."""
        return all(PermissionTokens.WILDCARD in part for part in self.parts)

    def part_is_wildcard(self, index: int) -> bool:
        """Check whether the position at ``index`` carries the wildcard token."""
        return PermissionTokens.WILDCARD in self.parts[index]

    def __len__(self) -> int:
        return len(self.parts)

    def __str__(self) -> str:
        return PermissionTokens.PART_DIVIDER.join(
            PermissionTokens.SUBPART_DIVIDER.join(sorted(part)) for part in self.parts
        )

    def __repr__(self) -> str:
        return f"PermissionExpression({str(self)!r})"


@lru_cache(maxsize=4096)
def parse_permission(text: str) -> PermissionExpression:
    """Parse a permission string, caching the result per distinct string."""
    return PermissionExpression.parse(text)

"""Account record supplied by a backing identity store."""

from dataclasses import dataclass, field
from typing import FrozenSet, Tuple


@dataclass(frozen=True)
class Account:
    """A principal as known to a backing store.

    Only login and snapshot building read accounts; the checking path works
    from the resolved ``GrantSet``.
    """

    principal: str
    secret: str = field(repr=False)
    roles: FrozenSet[str] = frozenset()
    permissions: Tuple[str, ...] = ()
    enabled: bool = True

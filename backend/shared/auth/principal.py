from dataclasses import dataclass
from typing import Any, Optional


@dataclass(frozen=True)
class Principal:
    """The authenticated identity making a request."""
    id: int
    role: str = "user"
    partner_id: Optional[int] = None

    @property
    def is_partner(self) -> bool:
        return self.partner_id is not None


def is_owner(principal: Principal, owner_id: Any) -> bool:
    """Whether the principal's partner identity owns a resource."""
    return principal.partner_id is not None and principal.partner_id == owner_id

"""Card domain entity."""

from dataclasses import dataclass, field
from typing import Optional

from .audit import AuditInfo


@dataclass
class Card:
    """A card issued against a mobile number."""

    mobile_number: str
    card_number: str
    card_type: str
    total_limit: int
    amount_used: int
    available_amount: int
    card_id: Optional[int] = None
    audit: AuditInfo = field(default_factory=AuditInfo)

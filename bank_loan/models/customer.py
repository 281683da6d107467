"""Customer model."""

from dataclasses import dataclass, field
from datetime import datetime


@dataclass
class Customer:
    """Bank customer entity.

    Carried by a loan for record-keeping only.
    """

    customer_id: str
    cpf: str
    name: str
    email: str
    created_at: datetime = field(default_factory=datetime.now)

"""Strongly typed identifiers for investment flow entities.

Entities owned by this service use UUIDs. Users, offerings and investments
belong to other parts of the platform and keep their integer ids.
"""

from typing import NewType
from uuid import UUID

# Owned entity identifiers
ReservationId = NewType("ReservationId", UUID)
EligibilityId = NewType("EligibilityId", UUID)
PaymentId = NewType("PaymentId", UUID)
EscrowAccountId = NewType("EscrowAccountId", UUID)

# Collaborator identifiers
UserId = NewType("UserId", int)
OfferingId = NewType("OfferingId", int)
InvestmentId = NewType("InvestmentId", int)

from theater.services.formatting import usd
from theater.services.pricing import (
    DEFAULT_POLICY,
    PricingPolicy,
    compute_charge,
    compute_volume_credits,
)
from theater.services.statement_service import (
    Statement,
    StatementLine,
    StatementService,
    generate_statement,
)

__all__ = [
    "PricingPolicy",
    "DEFAULT_POLICY",
    "compute_charge",
    "compute_volume_credits",
    "usd",
    "Statement",
    "StatementLine",
    "StatementService",
    "generate_statement",
]

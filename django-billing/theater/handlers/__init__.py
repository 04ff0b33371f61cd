from theater.handlers.serializers import (
    InvoiceSerializer,
    PerformanceSerializer,
    PlaySerializer,
    StatementSerializer,
    load_invoice,
    load_plays,
)

__all__ = [
    "PlaySerializer",
    "PerformanceSerializer",
    "InvoiceSerializer",
    "StatementSerializer",
    "load_plays",
    "load_invoice",
]

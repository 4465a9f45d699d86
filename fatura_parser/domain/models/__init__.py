"""
Modelos de dominio del proyecto fatura-parser.

Todos los modelos son dataclasses inmutables (frozen=True) que representan
los datos del negocio sin dependencias externas.

Uso:
    from fatura_parser.domain.models import TextFragment, TransactionRecord, StatementResult
"""

from fatura_parser.domain.models.card_context import CardContext
from fatura_parser.domain.models.reconstructed_line import Column, ReconstructedLine
from fatura_parser.domain.models.statement_layout import (
    DEFAULT_LAYOUT,
    HolderRule,
    StatementLayout,
)
from fatura_parser.domain.models.statement_result import BillingPeriod, StatementResult
from fatura_parser.domain.models.text_fragment import TextFragment
from fatura_parser.domain.models.transaction_record import Category, TransactionRecord

__all__ = [
    "DEFAULT_LAYOUT",
    "BillingPeriod",
    "CardContext",
    "Category",
    "Column",
    "HolderRule",
    "ReconstructedLine",
    "StatementLayout",
    "StatementResult",
    "TextFragment",
    "TransactionRecord",
]

"""
Modelo de dominio: Resultado completo del parseo de una fatura.

Es el contrato entre el núcleo y los adaptadores de salida:
- Lo PRODUCE parse_statement (Aggregator).
- Lo CONSUMEN los OutputWriter (JSON, Excel).
- Lo REGISTRA el ProcessLogger.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal

from fatura_parser.domain.models.transaction_record import TransactionRecord


@dataclass(frozen=True)
class BillingPeriod:
    """Mes de referencia de la fatura.

    Se deriva del vencimiento: una fatura que vence el 10/04/2024 es la
    fatura de marzo de 2024.
    """

    key: str
    """Clave ordenable 'YYYY-MM'."""

    label: str
    """Etiqueta legible. Ejemplo: 'Março/24'."""

    due_date: date | None = None
    """Fecha de vencimiento de la que se derivó. None si no se encontró
    y se usó la fecha de procesamiento como fallback."""

    @property
    def is_known(self) -> bool:
        return self.due_date is not None

    def __post_init__(self) -> None:
        if len(self.key) != 7 or self.key[4] != "-":
            raise ValueError(f"Clave de periodo inválida: '{self.key}'. Esperado: YYYY-MM")


@dataclass(frozen=True)
class StatementResult:
    """Resultado del parseo de una fatura."""

    transactions: tuple[TransactionRecord, ...]
    """Transacciones deduplicadas, en orden de lectura."""

    total: Decimal
    """Suma de todas las transacciones."""

    totals_by_card: Mapping[str, Decimal]
    """Suma por etiqueta de tarjeta, en orden de aparición. De solo lectura."""

    billing_period: BillingPeriod
    """Mes de referencia de la fatura."""

    totals_by_owner: Mapping[str, Decimal] = field(default_factory=dict)
    """Suma por titular, en orden de aparición. De solo lectura."""

    due_date_text: str = ""
    """Vencimiento tal como aparece en la fatura ('DD/MM/YYYY').
    Vacío si no se encontró."""

    source_file: str = ""
    """Nombre del archivo original, para trazabilidad en la bitácora."""

    @property
    def month(self) -> str:
        return self.billing_period.key

    @property
    def month_label(self) -> str:
        return self.billing_period.label

    @property
    def num_transactions(self) -> int:
        return len(self.transactions)

    @property
    def count_by_card(self) -> dict[str, int]:
        """Cantidad de transacciones por tarjeta."""
        counts: dict[str, int] = {}
        for record in self.transactions:
            counts[record.card_label] = counts.get(record.card_label, 0) + 1
        return counts

    def __post_init__(self) -> None:
        if self.total < Decimal("0"):
            raise ValueError(f"El total no puede ser negativo: {self.total}")

"""
Modelo de dominio: Transacción de tarjeta de crédito.

Un TransactionRecord representa una compra (a la vista o en cuotas) de una
fatura. Lo emite el StatementScanner y lo deduplica el Aggregator.

Decisiones de diseño:
- El monto es `Decimal`, igual que en el resto de montos del proyecto.
- La fecha se guarda como texto "DD/MM" porque la fatura no imprime el año
  de cada compra (las cuotas pueden venir de compras de años anteriores).
"""

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum


class Category(str, Enum):
    """Tipo de transacción. Los valores son las etiquetas de la fatura."""

    INSTALLMENT = "Parcelamento"
    CASH = "À Vista"


@dataclass(frozen=True)
class TransactionRecord:
    """Una transacción extraída de la fatura."""

    date: str
    """Fecha de la compra en formato 'DD/MM'."""

    description: str
    """Descripción del establecimiento. Si es una cuota, termina con el
    índice entre paréntesis. Ejemplo: 'STORE ABC (01/06)'."""

    amount: Decimal
    """Valor de la transacción. Siempre > 0 (pagos y estornos se descartan)."""

    card_label: str
    """Etiqueta de la tarjeta: 'NOMBRE – 1234'."""

    owner_label: str
    """Etiqueta del titular según la lista de titulares incluidos."""

    category: Category
    """Parcelamento o À Vista."""

    @property
    def dedup_key(self) -> tuple[str, str, Decimal, str]:
        """Clave de deduplicación: (fecha, descripción, monto, tarjeta)."""
        return (self.date, self.description, self.amount, self.card_label)

    @property
    def is_installment(self) -> bool:
        return self.category is Category.INSTALLMENT

    def __post_init__(self) -> None:
        if self.amount <= Decimal("0"):
            raise ValueError(f"El monto debe ser positivo: {self.amount}")
        if not self.card_label:
            raise ValueError("La transacción debe tener una tarjeta asociada")

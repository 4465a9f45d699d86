"""
Servicio de dominio: Agregación del resultado de la fatura.

Recibe las transacciones emitidas por el scanner y produce el
StatementResult:
1. Deduplica por (fecha, descripción, valor, tarjeta). Gana la primera
   ocurrencia. Los duplicados aparecen cuando la misma línea física se
   reconstruye dos veces cerca del límite entre columnas o páginas.
2. Calcula el total general, por tarjeta y por titular.
3. Determina el mes de referencia a partir del vencimiento:
   vencimiento 10/04/2024 → fatura de março/2024.
"""

from collections.abc import Iterable
from datetime import date
from decimal import Decimal
from types import MappingProxyType

from fatura_parser.domain.models.reconstructed_line import ReconstructedLine
from fatura_parser.domain.models.statement_layout import DEFAULT_LAYOUT, StatementLayout
from fatura_parser.domain.models.statement_result import BillingPeriod, StatementResult
from fatura_parser.domain.models.transaction_record import TransactionRecord
from fatura_parser.domain.shared.date_parser import parse_full_date, previous_month
from fatura_parser.domain.shared.month_map import month_label, unknown_month_label


def deduplicate(records: Iterable[TransactionRecord]) -> list[TransactionRecord]:
    """Elimina transacciones repetidas conservando la primera ocurrencia.

    Es idempotente: deduplicate(deduplicate(x)) == deduplicate(x).
    """
    seen: set[tuple[str, str, Decimal, str]] = set()
    unique: list[TransactionRecord] = []

    for record in records:
        key = record.dedup_key
        if key in seen:
            continue
        seen.add(key)
        unique.append(record)

    return unique


def sum_by(records: Iterable[TransactionRecord], attribute: str) -> dict[str, Decimal]:
    """Suma de valores agrupada por un atributo del registro.

    Las claves quedan en orden de primera aparición.
    """
    totals: dict[str, Decimal] = {}
    for record in records:
        key = getattr(record, attribute)
        totals[key] = totals.get(key, Decimal("0")) + record.amount
    return totals


def find_due_date(
    lines: Iterable[ReconstructedLine],
    layout: StatementLayout = DEFAULT_LAYOUT,
) -> str:
    """Busca el vencimiento ('DD/MM/YYYY') en TODAS las líneas.

    Devuelve la primera coincidencia con una fecha válida, o cadena vacía.
    """
    pattern = layout.due_date_regex
    for line in lines:
        match = pattern.search(line.text)
        if not match:
            continue
        try:
            parse_full_date(match.group(1))
        except ValueError:
            continue
        return match.group(1)
    return ""


def billing_period_from_due_date(due_date: date, language: str = "pt") -> BillingPeriod:
    """Mes de referencia: el mes anterior al vencimiento.

    Ejemplos:
        >>> billing_period_from_due_date(date(2024, 4, 10)).key
        '2024-03'
        >>> billing_period_from_due_date(date(2024, 1, 5), "en").label
        'December/23'
    """
    year, month = previous_month(due_date)
    return BillingPeriod(
        key=f"{year:04d}-{month:02d}",
        label=month_label(year, month, language),
        due_date=due_date,
    )


def fallback_billing_period(today: date, language: str = "pt") -> BillingPeriod:
    """Periodo cuando la fatura no tiene vencimiento: el mes de procesamiento,
    con una etiqueta que indica que el mes es desconocido."""
    return BillingPeriod(
        key=f"{today.year:04d}-{today.month:02d}",
        label=unknown_month_label(language),
        due_date=None,
    )


def aggregate(
    records: Iterable[TransactionRecord],
    due_date_text: str = "",
    layout: StatementLayout = DEFAULT_LAYOUT,
    today: date | None = None,
    source_file: str = "",
) -> StatementResult:
    """Construye el StatementResult final.

    Args:
        records: Transacciones del scanner, en orden de lectura.
        due_date_text: Vencimiento 'DD/MM/YYYY' (vacío si no se encontró).
        layout: Define el idioma de la etiqueta del mes.
        today: Fecha de procesamiento para el fallback. Por defecto, hoy.
        source_file: Nombre del archivo original.
    """
    unique = deduplicate(records)

    total = sum((r.amount for r in unique), Decimal("0"))

    if due_date_text:
        period = billing_period_from_due_date(parse_full_date(due_date_text), layout.language)
    else:
        period = fallback_billing_period(today or date.today(), layout.language)

    return StatementResult(
        transactions=tuple(unique),
        total=total,
        totals_by_card=MappingProxyType(sum_by(unique, "card_label")),
        totals_by_owner=MappingProxyType(sum_by(unique, "owner_label")),
        billing_period=period,
        due_date_text=due_date_text,
        source_file=source_file,
    )

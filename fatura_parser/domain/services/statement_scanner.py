"""
Servicio de dominio: Scanner de la fatura.

Recorre las líneas en orden de lectura UNA sola vez, sin retroceder, y
clasifica cada línea en exactamente una categoría, en este orden de
prioridad:

    1. Encabezado de tarjeta   → nuevo CardContext (sección À Vista)
    2. Sin tarjeta activa      → se ignora hasta el primer encabezado
    3. Marcador de sección     → "Parcelamentos" / "Despesas"
    4. Ruido / resumen         → totales, IOF, juros, encabezados de tabla
    5. Tarjeta no incluida     → titular fuera de la lista de incluidos
    6. Transacción             → se emite un TransactionRecord
    7. Rechazada               → parecía transacción pero no lo es

El estado (la tarjeta activa) NO se guarda en el scanner: entra y sale
explícitamente de `scan_line` dentro de un ScannerState inmutable. Así cada
línea se puede probar de forma aislada.

Formato de los encabezados de tarjeta (ejemplos reales, anonimizados):

    RODRIGO S SILVA - 4321 XXXX XXXX 1234
    @ LUANA M SILVA - 5500 XXXX XXXX 9876
    MARIA OLIVEIRA - 4111 XXXX XXXX 0042

Formato de las transacciones:

    15/03 SUPERMERCADO XYZ 123,45
    02/03 LOJA ABC 01/06 89,90              ← cuota 1 de 6
    3 10/03 POSTO SHELL 250,00 1.250,00     ← índice + saldo (se ignora)
"""

import re
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from decimal import Decimal
from enum import Enum

from fatura_parser.domain.models.card_context import CardContext
from fatura_parser.domain.models.reconstructed_line import ReconstructedLine
from fatura_parser.domain.models.statement_layout import DEFAULT_LAYOUT, StatementLayout
from fatura_parser.domain.models.transaction_record import Category, TransactionRecord
from fatura_parser.domain.shared.money import parse_money

# --- Encabezado de tarjeta ---
_MASKED_RUN = re.compile(r"[X*]{4,}", re.IGNORECASE)
_DIGIT_MASK_DIGIT = re.compile(r"\d{4}\s*X+\s*X+\s*\d{4}", re.IGNORECASE)
_CARD_SUFFIX = re.compile(r"(?<!\d)(\d{4})(?=\s|$)")
_LEADING_NAME = re.compile(r"^[@\s]*([A-Z][A-Z\s]+?)\s*[-–]", re.IGNORECASE)

# --- Transacción ---
_DATE_TOKEN = re.compile(r"(\d{2}/\d{2})")
_TRAILING_AMOUNT = re.compile(r"(-?[\d.]+,\d{2})(?:\s+[\d.]+,\d{2})?$")
_INSTALLMENT_SUFFIX = re.compile(r"\s+(\d{2}/\d{2})$")
_LEADING_INDEX = re.compile(r"^\d+\s+")
_LEADING_JUNK = re.compile(r"^[@)\s]+")
_ONLY_NUMERIC = re.compile(r"^[\d,.]+$")
_BARE_FRACTION = re.compile(r"^\d+/\d+$")

_MIN_DESCRIPTION_LENGTH = 3
_DEFAULT_SUFFIX = "0000"


class LineKind(str, Enum):
    """Clasificación de una línea por el scanner."""

    CARD_HEADER = "card_header"
    NO_CONTEXT = "no_context"
    SECTION_MARKER = "section_marker"
    NOISE = "noise"
    EXCLUDED_CARD = "excluded_card"
    TRANSACTION = "transaction"
    REJECTED = "rejected"


@dataclass(frozen=True)
class ScannerState:
    """Estado del scanner entre líneas: la tarjeta activa (o ninguna)."""

    context: CardContext | None = None


@dataclass(frozen=True)
class ParsedTransaction:
    """Partes de una línea de transacción, antes de asociarla a una tarjeta."""

    date: str
    description: str
    amount: Decimal
    is_installment: bool


@dataclass(frozen=True)
class LineOutcome:
    """Resultado de procesar una línea."""

    kind: LineKind
    state: ScannerState
    """Estado para la línea siguiente."""

    record: TransactionRecord | None = None
    """Solo presente cuando kind == TRANSACTION."""

    reason: str = ""
    """Motivo del descarte, para la bitácora. Vacío si no se descartó."""

    @property
    def is_rejection(self) -> bool:
        return self.kind in (LineKind.NOISE, LineKind.EXCLUDED_CARD, LineKind.REJECTED)


# =================================================================
# Encabezado de tarjeta
# =================================================================


def is_card_header(text: str) -> bool:
    """Indica si la línea contiene un número de tarjeta enmascarado.

    Acepta una corrida de 4+ caracteres de máscara ("XXXX", "****") o el
    patrón dígitos-máscara-dígitos ("4321 XX XX 1234").
    """
    return bool(_MASKED_RUN.search(text) or _DIGIT_MASK_DIGIT.search(text))


def extract_card_suffix(text: str) -> str:
    """Último grupo aislado de 4 dígitos de la línea. '0000' si no hay."""
    matches = _CARD_SUFFIX.findall(text)
    return matches[-1] if matches else _DEFAULT_SUFFIX


def extract_holder_name(text: str, layout: StatementLayout = DEFAULT_LAYOUT) -> str:
    """Extrae el nombre del titular del encabezado.

    Prioridad:
    1. Un titular incluido: su token más las palabras que lo siguen
       ("RODRIGO S SILVA").
    2. Frase inicial antes de un guion ("MARIA OLIVEIRA - 4111 ...").
    3. El placeholder de titular desconocido.
    """
    rule = layout.holder_rule_for(text)
    if rule is not None:
        match = re.search(re.escape(rule.pattern) + r"[A-Z\s]*", text, re.IGNORECASE)
        return match.group(0).strip() if match else rule.pattern

    match = _LEADING_NAME.match(text)
    if match:
        return match.group(1).strip()

    return layout.unknown_holder


def parse_card_header(
    text: str, layout: StatementLayout = DEFAULT_LAYOUT
) -> CardContext | None:
    """Construye el CardContext de un encabezado, o None si no lo es.

    Cada encabezado arranca en la sección À Vista, aunque la tarjeta
    anterior haya terminado dentro de Parcelamentos.
    """
    if not is_card_header(text):
        return None

    holder_name = extract_holder_name(text, layout)
    include_flag = layout.is_included(text)

    return CardContext(
        holder_name=holder_name,
        card_suffix=extract_card_suffix(text),
        include_flag=include_flag,
        current_section=Category.CASH,
        owner_label=layout.owner_label_for(holder_name) if include_flag else "",
    )


# =================================================================
# Marcadores de sección y ruido
# =================================================================


def section_for_marker(
    text: str, layout: StatementLayout = DEFAULT_LAYOUT
) -> Category | None:
    """Sección que abre la línea, si la línea es SOLO una etiqueta de sección."""
    stripped = text.strip()
    if layout.installment_regex.match(stripped):
        return Category.INSTALLMENT
    if layout.cash_regex.match(stripped):
        return Category.CASH
    return None


def is_noise_line(text: str, layout: StatementLayout = DEFAULT_LAYOUT) -> bool:
    """Indica si la línea es de resumen, totales, tasas o encabezado de tabla."""
    return any(pattern.search(text) for pattern in layout.noise_regexes)


# =================================================================
# Transacción
# =================================================================


def parse_transaction(text: str) -> ParsedTransaction | None:
    """Extrae fecha, descripción y valor de una línea de transacción.

    Devuelve None si la línea no es una transacción válida: sin fecha,
    sin valor al final, valor <= 0 (pagos y estornos) o descripción
    que no parece un establecimiento.

    Ejemplos:
        >>> parse_transaction("15/03 SUPERMARKET XYZ 123,45").description
        'SUPERMARKET XYZ'
        >>> parse_transaction("02/03 STORE ABC 01/06 89,90").description
        'STORE ABC (01/06)'
    """
    parsed, _ = _parse_transaction_with_reason(text)
    return parsed


def _parse_transaction_with_reason(text: str) -> tuple[ParsedTransaction | None, str]:
    """Igual que parse_transaction, pero devuelve también el motivo del descarte."""
    date_match = _DATE_TOKEN.search(text)
    if not date_match:
        return (None, "sin fecha DD/MM")

    date = date_match.group(1)
    after_date = text[date_match.end() :].strip()

    amount_match = _TRAILING_AMOUNT.search(after_date)
    if not amount_match:
        return (None, "sin valor al final de la línea")

    try:
        amount = parse_money(amount_match.group(1))
    except ValueError:
        return (None, f"valor ilegible: '{amount_match.group(1)}'")

    if amount <= Decimal("0"):
        return (None, f"valor no positivo: {amount_match.group(1)}")

    description = after_date[: amount_match.start()].strip()

    # Cuota: "LOJA ABC 01/06" → "LOJA ABC (01/06)"
    is_installment = False
    installment_match = _INSTALLMENT_SUFFIX.search(description)
    if installment_match:
        index = installment_match.group(1)
        description = f"{description[: installment_match.start()].strip()} ({index})"
        is_installment = True

    description = _LEADING_INDEX.sub("", description)
    description = _LEADING_JUNK.sub("", description).strip()

    if len(description) < _MIN_DESCRIPTION_LENGTH:
        return (None, f"descripción demasiado corta: '{description}'")
    if _ONLY_NUMERIC.match(description):
        return (None, f"descripción solo numérica: '{description}'")
    if _BARE_FRACTION.match(description):
        return (None, f"descripción es una fracción: '{description}'")

    return (
        ParsedTransaction(
            date=date,
            description=description,
            amount=amount,
            is_installment=is_installment,
        ),
        "",
    )


# =================================================================
# Máquina de estados
# =================================================================


def scan_line(
    text: str,
    state: ScannerState,
    layout: StatementLayout = DEFAULT_LAYOUT,
) -> LineOutcome:
    """Clasifica una línea y devuelve el estado para la siguiente.

    Función pura: no modifica `state`.
    """
    header = parse_card_header(text, layout)
    if header is not None:
        return LineOutcome(kind=LineKind.CARD_HEADER, state=ScannerState(context=header))

    context = state.context
    if context is None:
        return LineOutcome(kind=LineKind.NO_CONTEXT, state=state, reason="sin tarjeta activa")

    section = section_for_marker(text, layout)
    if section is not None:
        return LineOutcome(
            kind=LineKind.SECTION_MARKER,
            state=ScannerState(context=context.with_section(section)),
        )

    if is_noise_line(text, layout):
        return LineOutcome(kind=LineKind.NOISE, state=state, reason="línea de resumen/ruido")

    if not context.include_flag:
        return LineOutcome(
            kind=LineKind.EXCLUDED_CARD,
            state=state,
            reason=f"tarjeta no incluida: {context.card_label}",
        )

    parsed, reason = _parse_transaction_with_reason(text)
    if parsed is None:
        return LineOutcome(kind=LineKind.REJECTED, state=state, reason=reason)

    record = TransactionRecord(
        date=parsed.date,
        description=parsed.description,
        amount=parsed.amount,
        card_label=context.card_label,
        owner_label=context.owner_label,
        category=Category.INSTALLMENT if parsed.is_installment else context.current_section,
    )
    return LineOutcome(kind=LineKind.TRANSACTION, state=state, record=record)


def iter_scan(
    lines: Iterable[ReconstructedLine],
    layout: StatementLayout = DEFAULT_LAYOUT,
    initial: ScannerState | None = None,
) -> Iterator[tuple[ReconstructedLine, LineOutcome]]:
    """Recorre las líneas en orden, encadenando el estado de una a otra.

    Yields:
        (línea, resultado) para cada línea de entrada.
    """
    state = initial if initial is not None else ScannerState()
    for line in lines:
        outcome = scan_line(line.text, state, layout)
        state = outcome.state
        yield (line, outcome)


def scan_lines(
    lines: Iterable[ReconstructedLine],
    layout: StatementLayout = DEFAULT_LAYOUT,
) -> list[TransactionRecord]:
    """Transacciones emitidas (antes de deduplicar), en orden de lectura."""
    return [
        outcome.record
        for _, outcome in iter_scan(lines, layout)
        if outcome.record is not None
    ]

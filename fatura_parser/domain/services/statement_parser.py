"""
Servicio de dominio: Parseo de una fatura a partir de sus fragmentos.

Compone las etapas del núcleo, cada una consumiendo la salida de la
anterior:

    fragmentos → LineReconstructor → LineSequencer → StatementScanner → Aggregator

Es el único punto de entrada que necesita un llamador externo (CLI,
servicio HTTP, tests): recibe la lista completa de TextFragment y devuelve
un StatementResult. No hace I/O.
"""

from collections.abc import Iterable
from datetime import date

from fatura_parser.domain.models.statement_layout import DEFAULT_LAYOUT, StatementLayout
from fatura_parser.domain.models.statement_result import StatementResult
from fatura_parser.domain.models.text_fragment import TextFragment
from fatura_parser.domain.models.transaction_record import TransactionRecord
from fatura_parser.domain.ports.process_logger import ProcessLogger
from fatura_parser.domain.services.aggregator import aggregate, find_due_date
from fatura_parser.domain.services.line_reconstructor import reconstruct_lines
from fatura_parser.domain.services.line_sequencer import sequence_lines
from fatura_parser.domain.services.statement_scanner import LineKind, iter_scan


def parse_statement(
    fragments: Iterable[TextFragment],
    layout: StatementLayout | None = None,
    logger: ProcessLogger | None = None,
    today: date | None = None,
    source_file: str = "",
) -> StatementResult:
    """Parsea los fragmentos de una fatura y devuelve el resultado.

    Args:
        fragments: Todos los fragmentos del documento, de todas las páginas.
        layout: Parámetros del layout. Por defecto, DEFAULT_LAYOUT (Santander).
        logger: Bitácora opcional. Recibe los encabezados de tarjeta, el
                vencimiento y cada línea descartada con su motivo.
        today: Fecha de procesamiento, usada solo si no hay vencimiento.
        source_file: Nombre del archivo original.

    Returns:
        StatementResult con las transacciones deduplicadas y los totales.
    """
    layout = layout or DEFAULT_LAYOUT

    lines = sequence_lines(reconstruct_lines(fragments, layout))

    due_date_text = find_due_date(lines, layout)
    if logger is not None and due_date_text:
        logger.log_due_date(due_date_text)

    records: list[TransactionRecord] = []

    for line, outcome in iter_scan(lines, layout):
        if outcome.record is not None:
            records.append(outcome.record)
            continue

        if logger is None:
            continue

        if outcome.kind is LineKind.CARD_HEADER and outcome.state.context is not None:
            logger.log_card_found(outcome.state.context, line)
        elif outcome.is_rejection:
            logger.log_line_rejected(line, outcome.reason)

    return aggregate(
        records,
        due_date_text=due_date_text,
        layout=layout,
        today=today,
        source_file=source_file,
    )

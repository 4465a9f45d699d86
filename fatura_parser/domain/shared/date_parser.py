"""
Conversión de fechas de la fatura.

La fatura usa dos formatos:
- "DD/MM"       → fecha de cada compra (sin año).
- "DD/MM/YYYY"  → vencimiento de la fatura.

El mes de referencia de la fatura es el mes ANTERIOR al vencimiento.
"""

import re
from datetime import date

_FULL_DATE = re.compile(r"^(\d{1,2})/(\d{1,2})/(\d{4})$")


def parse_full_date(date_text: str) -> date:
    """Parsea una fecha 'DD/MM/YYYY' a un objeto date.

    Raises:
        ValueError: Si el formato no coincide o la fecha no existe
                    (por ejemplo, 31/02/2024).

    Ejemplos:
        >>> parse_full_date("10/04/2024")
        datetime.date(2024, 4, 10)
    """
    text = date_text.strip()

    if not text:
        raise ValueError("El texto de fecha está vacío")

    m = _FULL_DATE.match(text)
    if not m:
        raise ValueError(f"Formato de fecha no reconocido: '{text}'. Esperado: DD/MM/YYYY")

    day = int(m.group(1))
    month = int(m.group(2))
    year = int(m.group(3))
    return _build_date(year, month, day, text)


def previous_month(reference: date) -> tuple[int, int]:
    """Devuelve (año, mes) del mes anterior a `reference`.

    Enero retrocede a diciembre del año anterior.

    Ejemplos:
        >>> previous_month(date(2024, 4, 10))
        (2024, 3)
        >>> previous_month(date(2024, 1, 10))
        (2023, 12)
    """
    month = reference.month - 1
    year = reference.year
    if month == 0:
        month = 12
        year -= 1
    return (year, month)


def _build_date(year: int, month: int, day: int, original_text: str) -> date:
    """Construye un date incluyendo el texto original en el error."""
    try:
        return date(year, month, day)
    except ValueError as e:
        raise ValueError(
            f"Fecha inválida construida de '{original_text}': "
            f"año={year}, mes={month}, día={day} — {e}"
        )

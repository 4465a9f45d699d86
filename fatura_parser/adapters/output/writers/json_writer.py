"""
Adaptador de salida: Escritor de JSON.

Serializa un StatementResult con las claves que consume el dashboard de
gastos:

    {
      "month": "2024-03",
      "monthLabel": "Março/24",
      "vencimento": "10/04/2024",
      "totalFatura": 213.35,
      "totalsByCard": {"RODRIGO S SILVA – 1234": 213.35},
      "totalsByOwner": {"Rodrigo": 213.35},
      "transactions": [
        {"date": "15/03", "desc": "SUPERMARKET XYZ", "val": 123.45,
         "card": "RODRIGO S SILVA – 1234", "owner": "Rodrigo",
         "type": "À Vista"}
      ]
    }
"""

import json
from decimal import Decimal
from pathlib import Path

from fatura_parser.domain.exceptions import OutputError
from fatura_parser.domain.models.statement_result import StatementResult
from fatura_parser.domain.ports.output_writer import OutputWriter


def _money(amount: Decimal) -> float:
    return float(amount)


def result_to_dict(result: StatementResult) -> dict:
    """Convierte el resultado en un diccionario serializable a JSON."""
    return {
        "month": result.month,
        "monthLabel": result.month_label,
        "vencimento": result.due_date_text or None,
        "totalFatura": _money(result.total),
        "totalsByCard": {k: _money(v) for k, v in result.totals_by_card.items()},
        "totalsByOwner": {k: _money(v) for k, v in result.totals_by_owner.items()},
        "transactions": [
            {
                "date": t.date,
                "desc": t.description,
                "val": _money(t.amount),
                "card": t.card_label,
                "owner": t.owner_label,
                "type": t.category.value,
            }
            for t in result.transactions
        ],
    }


class JsonWriter(OutputWriter):
    """Genera un archivo .json por fatura."""

    def __init__(self, indent: int = 2) -> None:
        self._indent = indent

    @property
    def extension(self) -> str:
        return ".json"

    def write(self, result: StatementResult, output_path: Path) -> Path:
        if output_path.suffix.lower() != self.extension:
            output_path = output_path.with_suffix(self.extension)

        output_path.parent.mkdir(parents=True, exist_ok=True)

        try:
            with open(output_path, "w", encoding="utf-8") as f:
                json.dump(result_to_dict(result), f, ensure_ascii=False, indent=self._indent)
        except OSError as e:
            raise OutputError(str(output_path), str(e)) from e

        return output_path

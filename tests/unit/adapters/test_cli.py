"""
Tests para el CLI.

El PdfplumberExtractor se reemplaza con un extractor en memoria, así que
el CLI se ejecuta completo (argumentos, procesamiento, escritura) sin PDF
real.
"""

import argparse
import json
from pathlib import Path

import pytest

from fatura_parser.cli import main as cli
from fatura_parser.domain.models.statement_layout import (
    DEFAULT_NOISE_PATTERNS,
    ENGLISH_NOISE_PATTERNS,
    HolderRule,
)
from fatura_parser.domain.models.text_fragment import TextFragment


def _line(text: str, y: float) -> list[TextFragment]:
    fragments, x = [], 40.0
    for word in text.split(" "):
        fragments.append(TextFragment(text=word, x=x, y=y, page=1))
        x += (len(word) + 1) * 7
    return fragments


FRAGMENTS = (
    _line("Due date: 10/04/2024", 760)
    + _line("RODRIGO S SILVA - 4321 XXXX XXXX 1234", 740)
    + _line("15/03 SUPERMARKET XYZ 123,45", 720)
    + _line("MARIA OLIVEIRA - 4111 XXXX XXXX 0042", 700)
    + _line("16/03 LIVRARIA CULTURA 45,00", 680)
)


class _MemoryExtractor:
    name = "memoria"

    def can_handle(self, file_path: Path) -> bool:
        return file_path.suffix.lower() == ".pdf"

    def extract(self, file_path: Path) -> list[TextFragment]:
        return list(FRAGMENTS)


@pytest.fixture
def pdf_file(tmp_path, monkeypatch):
    monkeypatch.setattr(cli, "PdfplumberExtractor", _MemoryExtractor)
    path = tmp_path / "fatura_marco.pdf"
    path.write_bytes(b"%PDF-1.4")
    return path


def _args(**overrides) -> argparse.Namespace:
    values = {
        "lang": "pt",
        "column_threshold": None,
        "y_bucket": None,
        "holders": None,
        "english_noise": False,
    }
    values.update(overrides)
    return argparse.Namespace(**values)


class TestParseHolder:
    def test_patron_y_etiqueta(self):
        assert cli.parse_holder("MARIA=Maria") == HolderRule("MARIA", "Maria")

    def test_sin_etiqueta_capitaliza_el_patron(self):
        assert cli.parse_holder("JOAO") == HolderRule("JOAO", "Joao")

    def test_patron_vacio(self):
        with pytest.raises(ValueError):
            cli.parse_holder("=Maria")


class TestBuildLayout:
    def test_valores_por_defecto(self):
        layout = cli.build_layout(_args())

        assert layout.column_threshold == 300.0
        assert [h.label for h in layout.holders] == ["Rodrigo", "Luana"]

    def test_overrides(self):
        layout = cli.build_layout(
            _args(lang="en", column_threshold=280.0, y_bucket=2.0, holders=["MARIA=Maria"])
        )

        assert layout.language == "en"
        assert layout.column_threshold == 280.0
        assert layout.y_bucket == 2.0
        assert layout.holders == (HolderRule("MARIA", "Maria"),)

    def test_ruido_en_ingles_es_opcional(self):
        assert "Balance" not in " ".join(cli.build_layout(_args()).noise_patterns)

        layout = cli.build_layout(_args(english_noise=True))

        assert layout.noise_patterns == DEFAULT_NOISE_PATTERNS + ENGLISH_NOISE_PATTERNS

    def test_umbral_invalido(self):
        with pytest.raises(ValueError):
            cli.build_layout(_args(column_threshold=-1.0))


class TestMain:
    def test_genera_json(self, pdf_file, tmp_path):
        salida = tmp_path / "salida"

        cli.main([str(pdf_file), "-o", str(salida)])

        data = json.loads((salida / "fatura_fatura_marco.json").read_text(encoding="utf-8"))
        assert data["month"] == "2024-03"
        assert data["monthLabel"] == "Março/24"
        assert [t["desc"] for t in data["transactions"]] == ["SUPERMARKET XYZ"]

    def test_holder_e_idioma(self, pdf_file, tmp_path):
        cli.main([str(pdf_file), "-o", str(tmp_path), "--holder", "MARIA=Maria", "--lang", "en"])

        data = json.loads((tmp_path / "fatura_fatura_marco.json").read_text(encoding="utf-8"))
        assert data["monthLabel"] == "March/24"
        assert data["totalsByOwner"] == {"Maria": pytest.approx(45.0)}

    def test_formato_excel(self, pdf_file, tmp_path):
        cli.main([str(pdf_file), "-o", str(tmp_path), "--format", "excel"])

        assert (tmp_path / "fatura_fatura_marco.xlsx").exists()

    def test_directorio(self, pdf_file, tmp_path):
        (tmp_path / "otra.pdf").write_bytes(b"%PDF-1.4")
        salida = tmp_path / "salida"

        cli.main([str(tmp_path), "-o", str(salida)])

        assert sorted(p.name for p in salida.glob("*.json")) == [
            "fatura_fatura_marco.json",
            "fatura_otra.json",
        ]

    def test_auditoria_imprime_descartes(self, pdf_file, tmp_path, capsys):
        cli.main([str(pdf_file), "-o", str(tmp_path), "--audit"])

        assert "tarjeta no incluida" in capsys.readouterr().out

    def test_ruta_inexistente_sale_con_1(self, pdf_file, tmp_path):
        with pytest.raises(SystemExit) as exc:
            cli.main([str(tmp_path / "no_existe.pdf")])
        assert exc.value.code == 1

    def test_nada_procesado_sale_con_1(self, tmp_path, monkeypatch):
        monkeypatch.setattr(cli, "PdfplumberExtractor", _MemoryExtractor)
        vacio = tmp_path / "vacio"
        vacio.mkdir()

        with pytest.raises(SystemExit) as exc:
            cli.main([str(vacio)])
        assert exc.value.code == 1

    def test_configuracion_invalida_sale_con_2(self, pdf_file):
        with pytest.raises(SystemExit) as exc:
            cli.main([str(pdf_file), "--y-bucket", "0"])
        assert exc.value.code == 2

"""
Tests para el PdfplumberExtractor.

pdfplumber se reemplaza con un doble en memoria (monkeypatch sobre el
módulo del adaptador): las páginas falsas devuelven palabras con las
mismas claves que extract_words() (text, x0, top, bottom).
"""

from types import SimpleNamespace

import pytest

from fatura_parser.adapters.input.fragment_extractors import pdfplumber_extractor
from fatura_parser.adapters.input.fragment_extractors.pdfplumber_extractor import (
    PdfplumberExtractor,
)
from fatura_parser.domain.exceptions import ExtractionError, FormatoInvalidoError


class _FakePage:
    def __init__(self, words, height: float = 842.0):
        self._words = words
        self.height = height

    def extract_words(self, **kwargs):
        return self._words


class _FakePdf:
    def __init__(self, pages):
        self.pages = pages

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        return False


def _make_word(text: str, x0: float, bottom: float) -> dict:
    return {"text": text, "x0": x0, "x1": x0 + len(text) * 7, "top": bottom - 10, "bottom": bottom}


@pytest.fixture
def pdf_file(tmp_path):
    path = tmp_path / "fatura.pdf"
    path.write_bytes(b"%PDF-1.4")
    return path


def _patch_open(monkeypatch, opener):
    monkeypatch.setattr(pdfplumber_extractor, "pdfplumber", SimpleNamespace(open=opener))


class TestPdfplumberExtractor:
    """Tests unitarios para PdfplumberExtractor."""

    @pytest.fixture
    def extractor(self):
        return PdfplumberExtractor()

    def test_nombre(self, extractor):
        assert extractor.name == "pdfplumber"

    @pytest.mark.parametrize("nombre, esperado", [("a.pdf", True), ("A.PDF", True), ("a.xlsx", False)])
    def test_can_handle(self, extractor, tmp_path, nombre, esperado):
        assert extractor.can_handle(tmp_path / nombre) is esperado

    def test_convierte_palabras_en_fragmentos(self, extractor, pdf_file, monkeypatch):
        pages = [
            _FakePage([_make_word("15/03", 40.0, 100.0), _make_word("PADARIA", 82.0, 100.0)]),
            _FakePage([_make_word("FARMACIA", 320.0, 142.0)]),
        ]
        _patch_open(monkeypatch, lambda path: _FakePdf(pages))

        fragments = extractor.extract(pdf_file)

        assert [(f.text, f.x, f.page) for f in fragments] == [
            ("15/03", 40.0, 1),
            ("PADARIA", 82.0, 1),
            ("FARMACIA", 320.0, 2),
        ]

    def test_eje_y_invertido(self, extractor, pdf_file, monkeypatch):
        """Una palabra más arriba en la página tiene una Y mayor."""
        pages = [_FakePage([_make_word("ARRIBA", 40, 100), _make_word("ABAJO", 40, 700)], height=842)]
        _patch_open(monkeypatch, lambda path: _FakePdf(pages))

        fragments = {f.text: f for f in extractor.extract(pdf_file)}

        assert fragments["ARRIBA"].y == 742.0
        assert fragments["ABAJO"].y == 142.0
        assert fragments["ARRIBA"].y > fragments["ABAJO"].y

    def test_omite_palabras_vacias(self, extractor, pdf_file, monkeypatch):
        pages = [_FakePage([_make_word(" ", 40, 100), _make_word("LOJA", 60, 100)])]
        _patch_open(monkeypatch, lambda path: _FakePdf(pages))

        assert [f.text for f in extractor.extract(pdf_file)] == ["LOJA"]

    def test_archivo_inexistente(self, extractor, tmp_path, monkeypatch):
        _patch_open(monkeypatch, lambda path: _FakePdf([]))
        with pytest.raises(FormatoInvalidoError, match="no existe"):
            extractor.extract(tmp_path / "no_existe.pdf")

    def test_extension_invalida(self, extractor, tmp_path, monkeypatch):
        path = tmp_path / "fatura.txt"
        path.write_text("x")
        _patch_open(monkeypatch, lambda p: _FakePdf([]))
        with pytest.raises(FormatoInvalidoError, match="Extensión"):
            extractor.extract(path)

    def test_pdf_sin_paginas(self, extractor, pdf_file, monkeypatch):
        _patch_open(monkeypatch, lambda path: _FakePdf([]))
        with pytest.raises(ExtractionError, match="no tiene páginas"):
            extractor.extract(pdf_file)

    def test_pdf_con_contrasena(self, extractor, pdf_file, monkeypatch):
        def _open(path):
            raise RuntimeError("PDF is encrypted and no password was given")

        _patch_open(monkeypatch, _open)
        with pytest.raises(ExtractionError, match="contraseña"):
            extractor.extract(pdf_file)

    def test_pdf_corrupto(self, extractor, pdf_file, monkeypatch):
        def _open(path):
            raise ValueError("No /Root object! - Is this really a PDF?")

        _patch_open(monkeypatch, _open)
        with pytest.raises(ExtractionError, match="corrupto"):
            extractor.extract(pdf_file)

    def test_pdfplumber_no_instalado(self, extractor, pdf_file, monkeypatch):
        monkeypatch.setattr(pdfplumber_extractor, "pdfplumber", None)
        with pytest.raises(ExtractionError, match="no está instalado"):
            extractor.extract(pdf_file)

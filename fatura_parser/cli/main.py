"""
Punto de entrada CLI: fatura-parser.

Uso:
    # Procesar una fatura, salida JSON junto al PDF
    fatura-parser /ruta/fatura_marco.pdf

    # Procesar todas las faturas de una carpeta, salida Excel
    fatura-parser /ruta/faturas -o /ruta/salida --format excel

    # Otros titulares y etiquetas en inglés
    fatura-parser fatura.pdf --holder "MARIA=Maria" --holder "JOAO=João" --lang en

    # Ver por qué se descartó cada línea
    fatura-parser fatura.pdf --audit

Este módulo es el ÚNICO lugar donde se ensamblan los componentes:
- Crea las instancias concretas (PdfplumberExtractor, JsonWriter, etc.)
- Las inyecta en el StatementProcessor.
- Ejecuta el procesamiento.
"""

import argparse
import dataclasses
import sys
from pathlib import Path

from fatura_parser.adapters.input.fragment_extractors.pdfplumber_extractor import (
    PdfplumberExtractor,
)
from fatura_parser.adapters.output.loggers.console_logger import ConsoleLogger
from fatura_parser.adapters.output.writers.excel_writer import ExcelWriter
from fatura_parser.adapters.output.writers.json_writer import JsonWriter
from fatura_parser.domain.exceptions import OutputError
from fatura_parser.domain.models.statement_layout import (
    DEFAULT_LAYOUT,
    DEFAULT_NOISE_PATTERNS,
    ENGLISH_NOISE_PATTERNS,
    HolderRule,
    StatementLayout,
)
from fatura_parser.domain.ports.output_writer import OutputWriter
from fatura_parser.domain.services.statement_processor import StatementProcessor

WRITERS: dict[str, type[OutputWriter]] = {
    "json": JsonWriter,
    "excel": ExcelWriter,
}


def main(argv: list[str] | None = None) -> None:
    """Punto de entrada principal del CLI."""
    args = _parse_args(argv)

    input_path = Path(args.input_path)
    output_dir = Path(args.output_dir) if args.output_dir else None

    try:
        layout = build_layout(args)
    except ValueError as e:
        print(f"❌ Configuración inválida: {e}")
        sys.exit(2)

    # --- Ensamblar componentes ---
    logger = ConsoleLogger(audit=args.audit)
    writer = WRITERS[args.format]()

    processor = StatementProcessor(
        fragment_extractors=[PdfplumberExtractor()],
        logger=logger,
        layout=layout,
    )

    if not input_path.exists():
        print(f"❌ La ruta no existe: {input_path}")
        sys.exit(1)

    if output_dir is None:
        output_dir = input_path.parent if input_path.is_file() else input_path
    output_dir.mkdir(parents=True, exist_ok=True)

    print("=" * 60)
    print("FATURA PARSER")
    print("=" * 60)
    print(f"  Entrada:  {input_path}")
    print(f"  Salida:   {output_dir}")
    print(f"  Formato:  {args.format}")
    print(f"  Titulares: {', '.join(h.pattern for h in layout.holders)}")
    print()

    if input_path.is_file():
        resultado = processor.process_file(input_path)
        resultados = [resultado] if resultado is not None else []
    else:
        resultados = processor.process_directory(input_path)

    if not resultados:
        logger.print_summary()
        print("\n❌ No se procesó ningún archivo.")
        sys.exit(1)

    for resultado in resultados:
        nombre_base = Path(resultado.source_file).stem or resultado.month
        output_file = output_dir / f"fatura_{nombre_base}{writer.extension}"
        try:
            creado = writer.write(resultado, output_file)
        except OutputError as e:
            print(f"  ❌ {e}")
            continue
        print(f"📁 Generado: {creado}")

    logger.print_summary()


def build_layout(args: argparse.Namespace) -> StatementLayout:
    """Construye el StatementLayout a partir de los argumentos.

    Raises:
        ValueError: Si algún valor es inválido (umbral negativo, --holder
                    sin '=', idioma desconocido).
    """
    overrides: dict = {"language": args.lang}

    if args.column_threshold is not None:
        overrides["column_threshold"] = args.column_threshold
    if args.y_bucket is not None:
        overrides["y_bucket"] = args.y_bucket
    if args.holders:
        overrides["holders"] = tuple(parse_holder(h) for h in args.holders)
    if args.english_noise:
        overrides["noise_patterns"] = DEFAULT_NOISE_PATTERNS + ENGLISH_NOISE_PATTERNS

    return dataclasses.replace(DEFAULT_LAYOUT, **overrides)


def parse_holder(value: str) -> HolderRule:
    """Convierte 'PATRON=Etiqueta' en un HolderRule.

    Sin '=', la etiqueta es el patrón capitalizado: 'MARIA' → 'Maria'.
    """
    pattern, sep, label = value.partition("=")
    pattern = pattern.strip()
    label = label.strip() if sep else pattern.capitalize()
    return HolderRule(pattern=pattern, label=label)


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parsea los argumentos de línea de comandos."""
    parser = argparse.ArgumentParser(
        prog="fatura-parser",
        description="Extractor de transacciones de faturas de tarjeta de crédito",
        epilog="Ejemplo: fatura-parser /ruta/faturas -o /ruta/salida --format excel",
    )

    parser.add_argument(
        "input_path",
        help="Ruta a un archivo PDF o a un directorio con PDFs",
    )

    parser.add_argument(
        "-o",
        "--output-dir",
        dest="output_dir",
        help="Directorio de salida. Si no se especifica, se usa el mismo "
        "directorio del PDF.",
    )

    parser.add_argument(
        "--format",
        choices=sorted(WRITERS),
        default="json",
        help="Formato de salida (por defecto: json)",
    )

    parser.add_argument(
        "--column-threshold",
        dest="column_threshold",
        type=float,
        default=None,
        help=f"Coordenada X que separa las columnas (por defecto: {DEFAULT_LAYOUT.column_threshold:g})",
    )

    parser.add_argument(
        "--y-bucket",
        dest="y_bucket",
        type=float,
        default=None,
        help=f"Tamaño del intervalo de cuantización Y (por defecto: {DEFAULT_LAYOUT.y_bucket:g})",
    )

    parser.add_argument(
        "--holder",
        dest="holders",
        action="append",
        metavar="PATRON=ETIQUETA",
        help="Titular incluido (repetible). Reemplaza la lista por defecto.",
    )

    parser.add_argument(
        "--lang",
        choices=["pt", "en"],
        default=DEFAULT_LAYOUT.language,
        help="Idioma de la etiqueta del mes (por defecto: pt)",
    )

    parser.add_argument(
        "--english-noise",
        dest="english_noise",
        action="store_true",
        help="Descarta también líneas de resumen en inglés (Balance, Payment, ...)",
    )

    parser.add_argument(
        "--audit",
        action="store_true",
        help="Imprime cada línea descartada con su motivo",
    )

    return parser.parse_args(argv)


if __name__ == "__main__":
    main()

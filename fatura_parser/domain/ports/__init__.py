"""
Puertos (interfaces) del dominio.

Los puertos definen QUÉ necesita el dominio, sin decir CÓMO se implementa.
Cada puerto tiene uno o más adaptadores que lo implementan.

Uso:
    from fatura_parser.domain.ports import FragmentExtractor, OutputWriter, ProcessLogger
"""

from fatura_parser.domain.ports.fragment_extractor import FragmentExtractor
from fatura_parser.domain.ports.output_writer import OutputWriter
from fatura_parser.domain.ports.process_logger import ProcessLogger

__all__ = [
    "FragmentExtractor",
    "OutputWriter",
    "ProcessLogger",
]

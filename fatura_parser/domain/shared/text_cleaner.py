"""
Utilidades de limpieza de texto.

Funciones reutilizables para normalizar el texto de los fragmentos antes
de reconstruir las líneas. No tienen lógica de negocio.
"""

import re


def clean_whitespace(text: str) -> str:
    """Reemplaza múltiples espacios/tabs por un solo espacio y hace strip.

    Ejemplos:
        >>> clean_whitespace("  SUPERMERCADO   XYZ   ")
        'SUPERMERCADO XYZ'
    """
    return re.sub(r"\s+", " ", text).strip()


def remove_non_printable(text: str) -> str:
    """Reemplaza caracteres no imprimibles (control chars) por espacio.

    pdfplumber a veces devuelve caracteres de control o espacios de ancho
    cero dentro de los fragmentos, que rompen los regex del scanner.

    Ejemplos:
        >>> remove_non_printable("PADARIA\\x00CENTRO")
        'PADARIA CENTRO'
    """
    return "".join(char if char.isprintable() else " " for char in text)


def normalize_spaces(text: str) -> str:
    """Convierte espacios no separables (NBSP) en espacios normales."""
    return text.replace("\u00a0", " ").replace("\u202f", " ")


def clean_fragment_text(text: str) -> str:
    """Aplica todas las limpiezas de un fragmento en secuencia.

    Secuencia:
    1. Espacios no separables → espacio
    2. Caracteres no imprimibles → espacio
    3. Colapsar espacios
    """
    text = normalize_spaces(text)
    text = remove_non_printable(text)
    return clean_whitespace(text)

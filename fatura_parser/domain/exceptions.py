"""
Excepciones de dominio del proyecto fatura-parser.

Jerarquía:
    ParserBaseError
    ├── FormatoInvalidoError        → El archivo no existe o no es un PDF
    ├── ExtractionError             → El decodificador no pudo producir fragmentos
    ├── ParseError                  → El documento se leyó pero no tiene texto útil
    └── OutputError                 → Error al generar el archivo de salida

Las líneas que no se pueden parsear (sin fecha, sin valor, descripción
corta) NO son errores: el scanner las descarta y sigue con la siguiente.
Solo los errores de esta jerarquía abortan el parseo de una fatura.
"""


class ParserBaseError(Exception):
    """Excepción base del proyecto. Todas las demás heredan de esta.

    El orquestador captura `ParserBaseError` para registrar el fallo en la
    bitácora y seguir con el siguiente archivo.
    """


class FormatoInvalidoError(ParserBaseError):
    """Se lanza cuando un archivo no tiene el formato esperado.

    Ejemplos:
    - Se esperaba un PDF pero el archivo es un .docx.
    - El archivo no existe.
    """

    def __init__(self, archivo: str, formato_esperado: str, detalle: str = ""):
        self.archivo = archivo
        self.formato_esperado = formato_esperado
        mensaje = f"Formato inválido en '{archivo}'. Se esperaba: {formato_esperado}"
        if detalle:
            mensaje += f" — {detalle}"
        super().__init__(mensaje)


class ExtractionError(ParserBaseError):
    """Se lanza cuando falla la extracción de fragmentos de un documento.

    Esto puede pasar porque:
    - El PDF está protegido con contraseña.
    - El PDF está corrupto o no tiene páginas.
    - pdfplumber no está instalado.

    Es fatal para toda la fatura: no se devuelven resultados parciales.
    """

    def __init__(self, archivo: str, causa: str):
        self.archivo = archivo
        self.causa = causa
        super().__init__(f"Error extrayendo fragmentos de '{archivo}': {causa}")


class ParseError(ParserBaseError):
    """Se lanza cuando el documento se decodificó pero no se puede parsear.

    Ejemplo: un PDF escaneado (solo imagen) que no tiene ningún fragmento
    de texto.
    """

    def __init__(self, archivo: str, causa: str):
        self.archivo = archivo
        self.causa = causa
        super().__init__(f"Error parseando la fatura '{archivo}': {causa}")


class OutputError(ParserBaseError):
    """Se lanza cuando falla la generación del archivo de salida.

    Esto puede pasar porque:
    - No hay permisos de escritura en el directorio de salida.
    - El disco está lleno.
    """

    def __init__(self, ruta_salida: str, causa: str):
        self.ruta_salida = ruta_salida
        self.causa = causa
        super().__init__(f"Error generando salida en '{ruta_salida}': {causa}")

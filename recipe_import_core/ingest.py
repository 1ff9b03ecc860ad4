from __future__ import annotations

import csv
import io
import logging
from typing import List

from .errors import InputTooLarge, TooShortInput

"""
recipe_import_core.ingest
=========================

Ingestión del texto pegado (texto crudo → filas de celdas).

Responsabilidad
----------------
- Cortar el texto en filas y cada fila en celdas.
- Recortar espacios de cada celda.
- Rechazar entradas demasiado cortas (o demasiado largas) antes de parsear.

NO hace:
---------
- Detección de secciones
- Interpretación de celdas

Diseño
------
Una copia desde Excel/Sheets es TSV: una celda con saltos de línea viaja entre
comillas dobles. Por eso se lee con `csv` (manteniendo la celda multi-línea como
una sola) y, si el texto no es TSV válido (comillas sin cerrar, comillas sueltas),
se cae a un corte plano por líneas y separador.
"""

logger = logging.getLogger(__name__)

Row = List[str]


def _normalize_newlines(text: str) -> str:
    return text.replace("\r\n", "\n").replace("\r", "\n")


def _split_quoted(text: str, delimiter: str) -> List[Row]:
    """
    Lectura TSV con soporte de celdas entre comillas.

    Levanta `csv.Error` si el texto no respeta el formato (modo estricto).
    """
    reader = csv.reader(io.StringIO(text), delimiter=delimiter, strict=True)
    return [list(cells) for cells in reader]


def _split_plain(text: str, delimiter: str) -> List[Row]:
    return [line.split(delimiter) for line in text.split("\n")]


def split_rows(
    text: str,
    delimiter: str = "\t",
    *,
    min_rows: int = 5,
    max_rows: int = 0,
) -> List[Row]:
    """
    Divide el texto pegado en filas de celdas recortadas.

    Garantías:
    ----------
    - Cada fila tiene al menos una celda (posiblemente "").
    - El orden de filas y celdas es el del texto.

    Raises:
    -------
    TooShortInput
        Si quedan menos de `min_rows` filas.
    InputTooLarge
        Si `max_rows > 0` y hay más filas que ese presupuesto.
    """
    body = _normalize_newlines(text or "").strip("\n")

    try:
        raw_rows = _split_quoted(body, delimiter)
    except csv.Error as e:
        logger.debug(f"Texto no es TSV con comillas válido ({e}); se usa corte plano")
        raw_rows = _split_plain(body, delimiter)

    rows: List[Row] = []
    for cells in raw_rows:
        trimmed = [c.strip() for c in cells]
        rows.append(trimmed or [""])

    if len(rows) < min_rows:
        raise TooShortInput(len(rows), min_rows)
    if max_rows and len(rows) > max_rows:
        raise InputTooLarge(len(rows), max_rows)

    return rows

"""
Errores fatales del importador.

Son las únicas excepciones que levanta el core y ocurren antes de interpretar
cualquier fila. Todo lo demás se reporta como `ParseWarning`.
"""

from __future__ import annotations


class RecipeImportError(Exception):
    """Base de los errores fatales del importador."""


class TooShortInput(RecipeImportError, ValueError):
    """
    La entrada tiene menos filas de las necesarias para contener una receta.
    """

    def __init__(self, row_count: int, min_rows: int):
        self.row_count = row_count
        self.min_rows = min_rows
        super().__init__(
            f"Input has {row_count} row(s); at least {min_rows} are needed. "
            "Please paste complete recipe data from the spreadsheet."
        )


class InputTooLarge(RecipeImportError, ValueError):
    """
    La entrada supera el presupuesto de filas configurado (`max_rows`).
    """

    def __init__(self, row_count: int, max_rows: int):
        self.row_count = row_count
        self.max_rows = max_rows
        super().__init__(
            f"Input has {row_count} rows; the import limit is {max_rows}."
        )

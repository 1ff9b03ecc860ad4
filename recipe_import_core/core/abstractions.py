"""
Abstracciones (Protocols) del importador.

Definen las interfaces que el engine espera de sus colaboradores, para poder
reemplazar el renderer (u otro handler de sección) sin tocar el orquestador.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, List, Optional, Protocol

if TYPE_CHECKING:
    from ..domain_models import Recipe
    from ..parsing.state import ParseState


class RowHandler(Protocol):
    """
    Handler de fila: recibe el estado de la pasada y las celdas de una fila ya
    clasificada, y agrega a lo sumo un hecho tipado.

    Los handlers del catálogo de encabezados y los extractores por sección
    cumplen esta interfaz.
    """

    def __call__(self, state: ParseState, cells: List[str]) -> None:
        ...


class DocumentRenderer(Protocol):
    """
    Interfaz para renderizar una receta parseada a Markdown.
    """

    def render_markdown(
        self,
        document: Recipe,
        profile: object,
        target_yield: Optional[float] = None,
    ) -> str:
        """
        Args:
            document: Receta parseada.
            profile: Perfil de render (qué secciones y con qué títulos).
            target_yield: Yield objetivo para escalar cantidades, opcional.

        Returns:
            Markdown renderizado como string.
        """
        ...

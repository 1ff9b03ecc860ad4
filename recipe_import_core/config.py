from dataclasses import dataclass
from functools import lru_cache
import os

from dotenv import load_dotenv

"""
recipe_import_core.config
=========================

Gestión centralizada de configuración del parser de recetas.

Este módulo define:
- La estructura de configuración (`Settings`)
- El mecanismo para cargar variables desde entorno (.env)
- Un acceso único y cacheado a la configuración (`get_settings`)

Convenciones
------------
- Las variables de entorno se cargan desde un archivo `.env` si existe.
- Los defaults reproducen el comportamiento histórico del importador de Excel
  (unidad "GM", categoría "Main Course", tiempos "30 minutes", etc.).
- `parse_recipe_sheet` acepta un `Settings` explícito: los tests no deberían
  depender del entorno.
"""

# Cargar variables de entorno desde .env (si existe)
load_dotenv()


@dataclass(frozen=True)
class Settings:
    """
    Contenedor tipado de configuración del importador.

    Attributes
    ----------
    delimiter:
        Separador de celdas. Una copia desde Excel/Sheets usa tabulador.
    min_rows:
        Mínimo de filas para intentar el parseo. Por debajo → `TooShortInput`.
    max_rows:
        Presupuesto de filas. Por encima → `InputTooLarge`. `0` lo desactiva.
    default_unit:
        Unidad asignada a ingredientes sin unidad.
    default_category:
        Categoría inicial de la receta (la corrige la revisión humana).
    default_time:
        Valor inicial de `prep_time` y `cook_time`.
    default_servings:
        Porciones iniciales; la fila de yield lo sobreescribe.
    sub_recipe_yield:
        Yield por defecto de cada sub-receta creada.
    photo_base_url / photo_size:
        Construyen las tres imágenes placeholder: `{base}/{recipe_id}-{n}/{size}`.
    output_dir:
        Directorio donde el CLI escribe JSON y Markdown.
    log_level:
        Nivel de logging para CLI y API.
    """

    # Parseo
    delimiter: str = "\t"
    min_rows: int = 5
    max_rows: int = 5000

    # Defaults del registro
    default_unit: str = "GM"
    default_category: str = "Main Course"
    default_time: str = "30 minutes"
    default_servings: str = "1 portion"
    sub_recipe_yield: str = "1 KG"

    # Presentación
    photo_base_url: str = "https://picsum.photos/seed"
    photo_size: str = "800/600"

    # I/O (solo CLI)
    output_dir: str = "output"
    log_level: str = "INFO"


def _int_env(name: str, default: int) -> int:
    raw = os.getenv(name, "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


@lru_cache
def get_settings() -> Settings:
    """
    Devuelve una instancia única y cacheada de `Settings`.

    Variables de entorno utilizadas
    -------------------------------
    - RECIPE_IMPORT_DELIMITER (default: tab)
    - RECIPE_IMPORT_MIN_ROWS (default: 5)
    - RECIPE_IMPORT_MAX_ROWS (default: 5000, 0 = sin límite)
    - RECIPE_IMPORT_DEFAULT_UNIT (default: "GM")
    - RECIPE_IMPORT_DEFAULT_CATEGORY (default: "Main Course")
    - RECIPE_IMPORT_DEFAULT_TIME (default: "30 minutes")
    - RECIPE_IMPORT_SUB_RECIPE_YIELD (default: "1 KG")
    - RECIPE_IMPORT_PHOTO_BASE_URL (default: "https://picsum.photos/seed")
    - RECIPE_IMPORT_PHOTO_SIZE (default: "800/600")
    - OUTPUT_DIR (default: "output")
    - LOG_LEVEL (default: "INFO")

    Notas
    -----
    - Un entero mal formado no rompe la carga: se usa el default.
    - `RECIPE_IMPORT_DELIMITER` acepta el literal `\\t`.
    """
    delimiter = os.getenv("RECIPE_IMPORT_DELIMITER", "\t")
    if delimiter in ("", "\\t", "tab"):
        delimiter = "\t"

    return Settings(
        delimiter=delimiter,
        min_rows=_int_env("RECIPE_IMPORT_MIN_ROWS", 5),
        max_rows=_int_env("RECIPE_IMPORT_MAX_ROWS", 5000),
        default_unit=os.getenv("RECIPE_IMPORT_DEFAULT_UNIT", "GM"),
        default_category=os.getenv("RECIPE_IMPORT_DEFAULT_CATEGORY", "Main Course"),
        default_time=os.getenv("RECIPE_IMPORT_DEFAULT_TIME", "30 minutes"),
        sub_recipe_yield=os.getenv("RECIPE_IMPORT_SUB_RECIPE_YIELD", "1 KG"),
        photo_base_url=os.getenv(
            "RECIPE_IMPORT_PHOTO_BASE_URL",
            "https://picsum.photos/seed"
        ),
        photo_size=os.getenv("RECIPE_IMPORT_PHOTO_SIZE", "800/600"),
        output_dir=os.getenv("OUTPUT_DIR", "output"),
        log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
    )

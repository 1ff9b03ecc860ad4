"""
recipe_import_core.cli
======================

Punto de entrada de línea de comandos del importador.

Lee el texto copiado de la planilla (desde un archivo o stdin), corre el flujo
completo y persiste dos artefactos en el directorio de salida:

- `<recipe_id>.json`: registro camelCase + advertencias + estado de completitud
- `<recipe_id>.md`: hoja de revisión renderizada según el perfil

Si la receta no tiene nombre (y por lo tanto no tiene `recipe_id`), los archivos
se llaman `recipe.json` / `recipe.md`.

Ejemplos
--------
    recipe-import planilla.tsv
    recipe-import planilla.tsv --out output/ --profile summary --yield 10
    pbpaste | recipe-import --stdin
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import List, Optional

from .config import get_settings
from .engine import run_recipe_import
from .errors import RecipeImportError

logger = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="recipe-import",
        description="Convierte una receta copiada desde Excel/Sheets en un registro estructurado.",
    )
    parser.add_argument(
        "path",
        nargs="?",
        help="Archivo con el texto pegado (TSV). Omitir si se usa --stdin.",
    )
    parser.add_argument(
        "--stdin",
        action="store_true",
        help="Leer el texto desde la entrada estándar.",
    )
    parser.add_argument(
        "--out",
        default=None,
        help="Directorio de salida (default: OUTPUT_DIR o ./output).",
    )
    parser.add_argument(
        "--profile",
        choices=["summary", "full"],
        default="full",
        help="Perfil de la hoja de revisión.",
    )
    parser.add_argument(
        "--yield",
        dest="target_yield",
        type=float,
        default=None,
        help="Yield objetivo para escalar cantidades en el Markdown.",
    )
    return parser


def _read_input(args: argparse.Namespace, parser: argparse.ArgumentParser) -> str:
    if args.stdin:
        return sys.stdin.read()
    if not args.path:
        parser.error("Indicá un archivo o usá --stdin.")
    path = Path(args.path)
    if not path.exists():
        parser.error(f"No existe el archivo: {path}")
    return path.read_text(encoding="utf-8")


def main(argv: Optional[List[str]] = None) -> int:
    """
    Ejecuta una importación completa y escribe los artefactos.

    Returns
    -------
    int
        0 si se generó el registro (aunque tenga advertencias), 1 ante un error
        fatal de entrada.
    """
    settings = get_settings()
    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.INFO),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    parser = _build_parser()
    args = parser.parse_args(argv)
    text = _read_input(args, parser)

    try:
        run = run_recipe_import(
            text=text,
            profile=args.profile,
            target_yield=args.target_yield,
            settings=settings,
        )
    except RecipeImportError as e:
        logger.error(f"Importación abortada: {e}")
        print(f"❌ {e}", file=sys.stderr)
        return 1

    result = run["result"]
    output_dir = Path(args.out or settings.output_dir)
    output_dir.mkdir(parents=True, exist_ok=True)

    stem = result.recipe.recipe_id or "recipe"
    json_path = output_dir / f"{stem}.json"
    md_path = output_dir / f"{stem}.md"

    document = {
        "recipe": run["payload"],
        "warnings": run["warnings"],
        "is_complete": result.is_complete,
        "missing_for_save": run["missing_for_save"],
    }
    json_path.write_text(json.dumps(document, indent=2, ensure_ascii=False), encoding="utf-8")
    md_path.write_text(run["markdown"], encoding="utf-8")

    print(f"✅ JSON generado en: {json_path.resolve()}")
    print(f"✅ Hoja de revisión generada en: {md_path.resolve()}")

    for message in run["warnings"]:
        print(f"⚠️ {message}")
    if run["missing_for_save"]:
        print(f"📝 Completar antes de guardar: {', '.join(run['missing_for_save'])}")

    return 0


if __name__ == "__main__":
    sys.exit(main())

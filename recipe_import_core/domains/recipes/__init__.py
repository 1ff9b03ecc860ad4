"""
Dominio de recetas de cocina.

- Ensamblado del registro final y export camelCase (`builder`)
- Hoja de revisión en Markdown (`renderer`, `profiles`)
- Interpretación y escalado de yields (`yield_utils`)
"""

"""
API HTTP para recipe-import-core.

Esta capa expone endpoints REST que usan el core interno (recipe_import_core.engine)
para convertir recetas pegadas desde una planilla en registros estructurados.

La API está diseñada para ser consumida por:
- La pantalla de importación del panel de administración
- Scripts de automatización
"""

"""
Interfaces genéricas del importador.

- `RowHandler`: handlers de fila (encabezados y extractores por sección)
- `DocumentRenderer`: renderers de la receta parseada
"""

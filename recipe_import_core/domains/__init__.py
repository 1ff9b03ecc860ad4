"""
Dominios del importador.

Actualmente solo `recipes`: ensamblado, export y render de recetas parseadas.
"""

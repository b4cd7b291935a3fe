"""Modelos y entidades del dominio.

Por qué:
- Aquí viven las estructuras de datos puras y estrictas (Pydantic v2) y la
  tabla fija de subcomandos.
- El dominio no conoce subprocess, fzf ni la CLI: solo conceptos del problema.
"""

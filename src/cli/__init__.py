"""Capa CLI: gateway `j` y comandos de administración `jfz` (Typer + Rich)."""

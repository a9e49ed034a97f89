"""Modelos del dominio.

Por qué:
- Estructuras de datos puras (Pydantic v2) compartidas por CLI y servicios.
- El dominio no conoce Typer ni Rich.
"""

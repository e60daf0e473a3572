"""Adaptadores: todo lo que toca httpx o el formato del wire.

Por qué aquí:
- `http_client` y `requester` son I/O puro; `jsonapi` traduce el wire a modelos.
- Los módulos de recursos solo arman paths y opciones y delegan en el `Requester`.
"""

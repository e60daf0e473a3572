"""Core del cliente: configuración, errores, validación y dominio.

Por qué separado de `adapters`:
- El Core no conoce httpx ni el wire: solo conceptos del API y contratos.
- Los adaptadores dependen del Core, nunca al revés.
"""

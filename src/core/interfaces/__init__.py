"""Interfaces/abstracciones del Core.

Por qué:
- `RequestProcessor` y `Transport` son Protocols: el transporte httpx y los
  procesadores se sustituyen por dobles en tests sin herencia.
- El Core depende de estas abstracciones, nunca de httpx.
"""

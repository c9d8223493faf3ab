"""Interfaces/abstracciones del Core.

Por qué:
- Define contratos (Protocol) para el lookup DNS y el fetch de la página destino.
- Permite invertir dependencias: los servicios reciben colaboradores inyectables.
"""

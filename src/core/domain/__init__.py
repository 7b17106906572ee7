"""Modelos y entidades del dominio.

Estructuras de datos puras (Pydantic v2 / dataclasses). El dominio no conoce
HTTP ni la CLI: solo IPs, coordenadas, pasos de la ISS y resultados.
"""

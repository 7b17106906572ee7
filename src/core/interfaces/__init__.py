"""Interfaces/abstracciones del Core.

Contratos (Protocol) que implementan los resolvers HTTP concretos.
"""

# src/inkwell/services/__init__.py
"""Use-case services and the access policy engine."""

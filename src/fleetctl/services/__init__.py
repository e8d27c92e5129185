"""Service layer — use-case handlers and the ServiceResult facade.

Services may import from domain and infrastructure layers.
They must never import from commands, output, or config.
"""

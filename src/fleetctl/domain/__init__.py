"""Domain layer — identifiers, vehicles, and the Fleet aggregate.

This layer depends only on stdlib.
It must never import from services, infrastructure, commands, or config.
"""

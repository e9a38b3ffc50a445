"""Domain layer — sites and label matching.

This layer depends only on stdlib.
It must never import from services, infrastructure, commands, or config.
"""

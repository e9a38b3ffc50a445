"""Infrastructure layer — store enumeration, glob search, file access.

This layer may import from domain. It must never import from services,
commands, or output.
"""

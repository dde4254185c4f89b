"""Domain layer — form model and layout resolution.

This layer depends only on stdlib and markupsafe.
It must never import from services, infrastructure, commands, or config.
"""

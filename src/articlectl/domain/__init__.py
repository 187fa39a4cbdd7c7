"""Domain layer: template schema inference, value coercion, rendering.

This layer depends only on stdlib, pydantic, and ruamel.yaml.
It must never import from services, infrastructure, commands, or config.
"""

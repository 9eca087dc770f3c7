"""Service layer: stateless operations returning Result values.

Services may import from config and infrastructure layers.
They must never import from commands, output, or cli.
"""

"""Domain layer — scanner, parser, binding tables, tree builder, inline resolver.

This layer depends only on the stdlib.
It must never import from services, commands, output, or config.
"""

"""Decode core: token stream, capabilities, and their composition.

This layer depends only on stdlib.
It must never import from services, plugins, commands, output, or config.
"""

"""Domain layer — locale rules, filters, and errors.

This layer depends only on the stdlib.
It must never import from services, infrastructure, commands, or config.
"""

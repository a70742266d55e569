"""Service layer — business logic returning ServiceResult.

Services may import from domain, config models, and infrastructure.
They must never import from commands or output.
"""

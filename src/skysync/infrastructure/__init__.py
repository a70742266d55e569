"""Infrastructure layer — filesystem, YAML reading, OneSky HTTP client.

This layer depends on stdlib and third-party libs (ruamel.yaml, httpx).
The service layer bridges between domain rules and infrastructure.
"""

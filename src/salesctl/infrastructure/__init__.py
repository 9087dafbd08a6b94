"""Infrastructure layer: database engine, schema, repositories, store.

This layer depends on stdlib and third-party libs (SQLAlchemy).
It must never import from services, commands, or output.
The service layer bridges between domain models and infrastructure.
"""

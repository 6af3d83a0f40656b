"""Infrastructure layer - Adapters implementing domain protocols.

Structure:
- security/: bcrypt hashing, JWT tokens, token blacklist, envelope encryption
- persistence/: in-memory database and repositories
- logging/: structlog console adapter

The infrastructure layer depends on the domain layer (implements protocols)
but the domain layer does NOT depend on infrastructure.
"""

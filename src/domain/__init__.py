"""Domain layer - Pure business logic.

Contains the user and vault entities, value objects, enums, error messages
and protocols (ports). The domain layer has NO dependencies on any framework
or infrastructure adapter.

Structure:
- entities/: Domain entities (mutable, have identity)
- value_objects/: Value objects (immutable, no identity)
- enums/: Closed enumerations (vault categories)
- errors/: User-facing error message constants
- protocols/: Repository and service interfaces
"""

"""Test suite for the vault core.

Test structure:
- unit/: Unit tests - domain logic and handlers with mocked collaborators
- integration/: Integration tests - real bcrypt, PyJWT and cryptography
  adapters over in-memory storage, plus end-to-end handler flows
"""

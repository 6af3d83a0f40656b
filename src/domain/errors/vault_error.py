"""Vault entry domain errors.

Defines vault-specific error messages for validation, ownership and
envelope encryption failures.

Architecture:
    - Domain layer errors (no infrastructure dependencies)
    - Used in Result types (railway-oriented programming)
"""


class VaultError:
    """Vault error message constants."""

    # -------------------------------------------------------------------------
    # Validation Errors
    # -------------------------------------------------------------------------

    SITE_NAME_REQUIRED = "Site name cannot be empty"
    SITE_NAME_TOO_LONG = "Site name cannot exceed 100 characters"
    SITE_URL_INVALID = "Site URL must be a valid http or https URL"
    USERNAME_REQUIRED = "Username cannot be empty"
    NOTES_TOO_LONG = "Notes cannot exceed 1000 characters"

    # -------------------------------------------------------------------------
    # Ownership Errors
    # -------------------------------------------------------------------------

    NOT_OWNED_BY_USER = "User is not authorized to access this vault entry"
    ENTRY_NOT_FOUND = "Vault entry with identifier '{entry_id}' was not found"

    # -------------------------------------------------------------------------
    # Encryption Errors
    # -------------------------------------------------------------------------

    ENCRYPTION_FAILED = "Failed to encrypt password"
    DECRYPTION_FAILED = "Failed to decrypt password: invalid key or tampered data"

"""Password hashing and verification for the login endpoint.

Older deployments stored passwords in clear text. Those rows still verify
(passlib's ``plaintext`` scheme, marked deprecated) and are rehashed with
pbkdf2_sha256 the first time their owner logs in.
"""

from typing import Optional

from passlib.context import CryptContext


class CredentialVerifier:
    """Hashes new passwords and checks stored ones.

    Swap the ``CryptContext`` (or subclass this) to change the scheme without
    touching the account service.
    """

    def __init__(self, context: Optional[CryptContext] = None):
        # plaintext identifies any string, so it must stay last
        self.context = context or CryptContext(
            schemes=["pbkdf2_sha256", "plaintext"],
            deprecated=["plaintext"],
        )

    def hash(self, password: str) -> str:
        return self.context.hash(password)

    def verify(self, password: str, stored: Optional[str]) -> tuple[bool, Optional[str]]:
        """Return (ok, new_hash). ``new_hash`` is set when the stored value needs upgrading."""
        if not stored:
            return False, None
        return self.context.verify_and_update(password, stored)


credential_verifier = CredentialVerifier()

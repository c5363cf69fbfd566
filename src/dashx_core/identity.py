"""Identity token generation for client-side account authentication."""
import base64
import os
from typing import Optional, Union

from cryptography.hazmat.primitives.ciphers.aead import AESGCM

from .exceptions import DashXConfigurationError


TOKEN_VERSION = "v1"
NONCE_SIZE_BYTES = 12


def generate_identity_token(
    private_key: Optional[str],
    uid: Union[str, int],
    kind: str = "regular",
    nonce: Optional[bytes] = None,
) -> str:
    """Encrypt ``v1;{kind};{uid}`` into a URL-safe identity token.

    AES-256-GCM keyed with the private key's UTF-8 bytes (which must be 32
    bytes long). The token is ``nonce || ciphertext || tag`` in URL-safe
    base64, padding kept.

    Args:
        private_key: Account private key
        uid: Account uid the token identifies
        kind: Token kind embedded in the plaintext
        nonce: 12-byte nonce; a random one is generated per call when omitted

    Raises:
        DashXConfigurationError: If private_key is not set
    """
    if not private_key:
        raise DashXConfigurationError(["private_key"])

    if nonce is None:
        nonce = os.urandom(NONCE_SIZE_BYTES)

    plaintext = f"{TOKEN_VERSION};{kind};{uid}".encode("utf-8")
    # AESGCM appends the 16-byte tag to the ciphertext
    sealed = AESGCM(private_key.encode("utf-8")).encrypt(nonce, plaintext, None)

    return base64.urlsafe_b64encode(nonce + sealed).decode("ascii")

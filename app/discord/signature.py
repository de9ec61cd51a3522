"""
Ed25519 request authentication for inbound interactions.
"""

import logging
from dataclasses import dataclass
from typing import Optional
from nacl.exceptions import BadSignatureError
from nacl.signing import VerifyKey
from app.config import get_settings

logger = logging.getLogger(__name__)

SIGNATURE_HEADER = "x-signature-ed25519"
TIMESTAMP_HEADER = "x-signature-timestamp"


@dataclass(frozen=True)
class VerificationResult:
    valid: bool
    body: str


class SignatureVerifier:

    def __init__(self, public_key: Optional[str] = None):
        self.public_key = public_key if public_key is not None else get_settings().discord_public_key
        self._verify_key: Optional[VerifyKey] = None

    def _get_verify_key(self) -> Optional[VerifyKey]:
        if self._verify_key is None:
            try:
                self._verify_key = VerifyKey(bytes.fromhex(self.public_key))
            except (ValueError, TypeError) as e:
                logger.error(f"Configured public key is not a valid Ed25519 key: {e}")
                return None
        return self._verify_key

    def verify(self, signature: Optional[str], timestamp: Optional[str], body: bytes) -> VerificationResult:
        """Check ``signature`` over the raw ``timestamp + body`` bytes.

        The body is decoded exactly once here and handed back so callers parse
        the same text that was authenticated. Missing headers fail closed.
        """
        body_text = body.decode("utf-8", errors="replace")

        if not signature or not timestamp:
            return VerificationResult(valid=False, body=body_text)

        verify_key = self._get_verify_key()
        if verify_key is None:
            return VerificationResult(valid=False, body=body_text)

        try:
            verify_key.verify(timestamp.encode("utf-8") + body, bytes.fromhex(signature))
        except (BadSignatureError, ValueError):
            return VerificationResult(valid=False, body=body_text)

        return VerificationResult(valid=True, body=body_text)

"""
Reversible obfuscation for snapshot tokens.

Plaintext is UTF-8 encoded, XORed byte by byte with a repeating key and
rendered as Base64. XOR with the same repeating key is its own inverse, so
decoding runs the identical pass after Base64 decoding.

Known limitation: the key is distributed with the code. Anyone with the source
can read a token; this keeps the key hidden from a casual glance at a link and
nothing more.
"""

from __future__ import annotations

import base64
import binascii
import numpy as np

from core.config import ENCRYPTION_KEY
from core.errors import DecodeFailure


class XorCodec:
    """
    Repeating-key XOR + Base64 codec.

    Attributes:
        key: Shared secret as bytes
    """

    def __init__(self, key: str = ENCRYPTION_KEY):
        """
        Initialize codec.

        Args:
            key: Shared secret (non-empty)
        """
        if not key:
            raise ValueError("Codec key must not be empty")
        self.key = key.encode("utf-8")
        self._key_bytes = np.frombuffer(self.key, dtype=np.uint8)

    def _xor(self, data: bytes) -> bytes:
        buf = np.frombuffer(data, dtype=np.uint8)
        # np.resize repeats the key to cover the whole buffer
        key = np.resize(self._key_bytes, buf.shape[0])
        return np.bitwise_xor(buf, key).tobytes()

    def encode(self, plaintext: str) -> str:
        """
        Encode plaintext into a text-safe token.

        Args:
            plaintext: Any string

        Returns:
            Base64 token
        """
        return base64.b64encode(self._xor(plaintext.encode("utf-8"))).decode("ascii")

    def decode(self, token: str) -> str:
        """
        Decode a token produced by encode().

        Args:
            token: Base64 token

        Returns:
            Original plaintext

        Raises:
            DecodeFailure: If the token is not valid Base64 or does not decode
                to UTF-8 text
        """
        try:
            raw = base64.b64decode(token.strip(), validate=True)
        except (binascii.Error, ValueError, AttributeError) as exc:
            raise DecodeFailure(f"Token is not valid Base64: {exc}") from exc

        try:
            return self._xor(raw).decode("utf-8")
        except UnicodeDecodeError as exc:
            raise DecodeFailure("Token does not decode to text") from exc

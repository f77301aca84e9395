"""Reversible encoding for secrets kept in the client-local cache.

This is obfuscation, not encryption. Anyone who can read the persisted blob
can decode the value; it only keeps query passwords out of plain sight.
"""

from __future__ import annotations

import base64


def encode_secret(plaintext: str) -> str:
    """Return an ASCII-safe encoding of `plaintext` (UTF-8 then base64)."""
    return base64.b64encode(plaintext.encode("utf-8")).decode("ascii")


def decode_secret(encoded: str) -> str:
    """Invert `encode_secret`.

    Input not produced by `encode_secret` is not validated and may raise
    or decode to garbage.
    """
    return base64.b64decode(encoded.encode("ascii")).decode("utf-8")

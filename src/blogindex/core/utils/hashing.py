"""SHA-256 content hashing for generated-file change detection"""

import hashlib


def sha256_bytes(data: bytes) -> str:
    """Return hex-encoded SHA-256 hash of raw bytes."""
    return hashlib.sha256(data).hexdigest()


def sha256(content: str) -> str:
    """Return hex-encoded SHA-256 hash of content encoded as UTF-8."""
    return sha256_bytes(content.encode("utf-8"))

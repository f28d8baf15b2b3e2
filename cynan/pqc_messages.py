"""Signed-message layouts and size checks for post-quantum primitives.

The authentication and inter-operator signatures cover a colon-joined
string of SIP metadata. The size checks enforce the fixed encodings of
ML-DSA-65 and ML-KEM-768 objects before they reach a crypto backend.
"""

from __future__ import annotations

ML_DSA_65_SIGNATURE_SIZE = 3309
ML_DSA_65_PUBLIC_KEY_SIZE = 1952
ML_KEM_768_CIPHERTEXT_SIZE = 1088
ML_KEM_768_PUBLIC_KEY_SIZE = 1184
ML_KEM_SHARED_SECRET_SIZE = 32
FALCON_512_SIGNATURE_SIZE = 666
FALCON_512_PUBLIC_KEY_SIZE = 897


def auth_message(nonce: str, method: str, uri: str) -> bytes:
    """Bytes signed for SIP authentication: ``nonce:method:uri``."""
    return f"{nonce}:{method}:{uri}".encode()


def ibcf_message(method: str, uri: str, call_id: str, cseq: str) -> bytes:
    """Bytes signed for IBCF traffic: ``method:uri:call_id:cseq``."""
    return f"{method}:{uri}:{call_id}:{cseq}".encode()


def _check_size(data: bytes, expected: int, what: str) -> bytes:
    raw = bytes(data)
    if len(raw) != expected:
        raise ValueError(
            f"Invalid {what} size: expected {expected} bytes, got {len(raw)}"
        )
    return raw


def check_ml_dsa_signature(signature: bytes) -> bytes:
    """Return the signature as bytes, or raise ValueError if not 3309 bytes."""
    return _check_size(signature, ML_DSA_65_SIGNATURE_SIZE, "ML-DSA signature")


def check_ml_dsa_public_key(key: bytes) -> bytes:
    """Return the key as bytes, or raise ValueError if not 1952 bytes."""
    return _check_size(key, ML_DSA_65_PUBLIC_KEY_SIZE, "ML-DSA public key")


def check_ml_kem_ciphertext(ciphertext: bytes) -> bytes:
    """Return the ciphertext as bytes, or raise ValueError if not 1088 bytes."""
    return _check_size(ciphertext, ML_KEM_768_CIPHERTEXT_SIZE, "ML-KEM ciphertext")


def check_ml_kem_public_key(key: bytes) -> bytes:
    """Return the key as bytes, or raise ValueError if not 1184 bytes."""
    return _check_size(key, ML_KEM_768_PUBLIC_KEY_SIZE, "ML-KEM public key")
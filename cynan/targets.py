"""Helpers for gRPC target strings."""

from __future__ import annotations


def extract_domain(target: str) -> str:
    """Return the host of a gRPC target, without scheme or port (for SNI)."""
    for scheme in ("https://", "http://"):
        if target.startswith(scheme):
            target = target[len(scheme):]
            break
    return target.split(":", 1)[0]
"""Building blocks for an IMS core: PQC settings and message layouts, IPsec bookkeeping, a module registry and SIP metrics."""

__version__ = "0.8.5"

__all__ = [
    "ipsec",
    "metrics",
    "pqc",
    "pqc_messages",
    "registry",
    "targets",
]
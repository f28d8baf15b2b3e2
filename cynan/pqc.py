"""Post-quantum cryptography mode and algorithm configuration."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class PqcMode(Enum):
    """Operational mode for post-quantum cryptography."""

    DISABLED = "disabled"
    HYBRID = "hybrid"
    PQC_ONLY = "pqc-only"

    @classmethod
    def parse(cls, text: str) -> "PqcMode":
        """Parse a mode from a configuration string (case-insensitive)."""
        normalized = text.lower()
        if normalized == "disabled":
            return cls.DISABLED
        if normalized == "hybrid":
            return cls.HYBRID
        if normalized in ("pqc-only", "pqc_only"):
            return cls.PQC_ONLY
        raise ValueError(
            f"Invalid PQC mode '{text}', expected 'disabled', 'hybrid', or 'pqc-only'"
        )

    def is_pqc_enabled(self) -> bool:
        """True for hybrid and PQC-only modes."""
        return self in (PqcMode.HYBRID, PqcMode.PQC_ONLY)

    def allows_classical(self) -> bool:
        """True when classical cryptography is still accepted."""
        return self in (PqcMode.DISABLED, PqcMode.HYBRID)


class MlDsaLevel(Enum):
    """ML-DSA security level."""

    LEVEL_44 = 44
    LEVEL_65 = 65
    LEVEL_87 = 87


class MlKemLevel(Enum):
    """ML-KEM security level."""

    LEVEL_512 = 512
    LEVEL_768 = 768
    LEVEL_1024 = 1024


class PqcSigningAlgorithm(Enum):
    """Preferred post-quantum signing algorithm."""

    ML_DSA_65 = "ML-DSA-65"
    FALCON_512 = "Falcon-512"


@dataclass
class PqcConfig:
    """Post-quantum cryptography configuration."""

    mode: PqcMode = PqcMode.HYBRID
    kem_level: MlKemLevel = MlKemLevel.LEVEL_768
    dsa_level: MlDsaLevel = MlDsaLevel.LEVEL_65
    signing_algorithm: PqcSigningAlgorithm = PqcSigningAlgorithm.ML_DSA_65
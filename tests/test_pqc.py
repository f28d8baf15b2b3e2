import pytest

from cynan.pqc import (
    MlDsaLevel,
    MlKemLevel,
    PqcConfig,
    PqcMode,
    PqcSigningAlgorithm,
)


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("disabled", PqcMode.DISABLED),
        ("hybrid", PqcMode.HYBRID),
        ("pqc-only", PqcMode.PQC_ONLY),
        ("pqc_only", PqcMode.PQC_ONLY),
    ],
)
def test_pqc_mode_parsing(text, expected):
    assert PqcMode.parse(text) is expected


def test_pqc_mode_parsing_is_case_insensitive():
    assert PqcMode.parse("HYBRID") is PqcMode.HYBRID
    assert PqcMode.parse("Pqc-Only") is PqcMode.PQC_ONLY


def test_pqc_mode_parsing_invalid():
    with pytest.raises(ValueError, match="Invalid PQC mode 'invalid'"):
        PqcMode.parse("invalid")


def test_pqc_mode_parse_roundtrip_of_values():
    for mode in PqcMode:
        assert PqcMode.parse(mode.value) is mode


def test_pqc_mode_checks():
    assert not PqcMode.DISABLED.is_pqc_enabled()
    assert PqcMode.HYBRID.is_pqc_enabled()
    assert PqcMode.PQC_ONLY.is_pqc_enabled()

    assert PqcMode.DISABLED.allows_classical()
    assert PqcMode.HYBRID.allows_classical()
    assert not PqcMode.PQC_ONLY.allows_classical()


def test_pqc_config_defaults():
    config = PqcConfig()
    assert config.mode is PqcMode.HYBRID
    assert config.kem_level is MlKemLevel.LEVEL_768
    assert config.dsa_level is MlDsaLevel.LEVEL_65
    assert config.signing_algorithm is PqcSigningAlgorithm.ML_DSA_65


def test_pqc_config_override():
    config = PqcConfig(
        mode=PqcMode.PQC_ONLY, signing_algorithm=PqcSigningAlgorithm.FALCON_512
    )
    assert config.mode is PqcMode.PQC_ONLY
    assert config.signing_algorithm is PqcSigningAlgorithm.FALCON_512
    assert config.kem_level is MlKemLevel.LEVEL_768
from pathlib import Path

import pytest

from arfingerprint.compose import DEFAULT_SECTIONS
from arfingerprint.config import FingerprintConfig, load_config
from arfingerprint.errors import ConfigError


def test_defaults_without_file() -> None:
    cfg = load_config(None)
    assert cfg.algorithm == "sha1"
    assert cfg.sections == DEFAULT_SECTIONS
    assert cfg.workers == 1
    assert cfg.manifest is None and cfg.report is None and cfg.audit_log is None


def test_load_yaml_mapping(tmp_path: Path) -> None:
    path = tmp_path / "cfg.yaml"
    path.write_text(
        "algorithm: SHA256\n"
        "sections: [.text, .rodata]\n"
        "workers: 4\n"
        "outputs:\n  manifest: out/manifest.json\n"
        "notes: kept aside\n",
        encoding="utf-8",
    )
    cfg = load_config(path)
    assert cfg.algorithm == "sha256"
    assert cfg.sections == (".text", ".rodata")
    assert cfg.workers == 4
    assert cfg.manifest == Path("out/manifest.json")
    assert cfg.extra == {"notes": "kept aside"}


def test_empty_file_gives_defaults(tmp_path: Path) -> None:
    path = tmp_path / "empty.yaml"
    path.write_text("", encoding="utf-8")
    assert load_config(path) == FingerprintConfig()


def test_missing_file(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        load_config(tmp_path / "nope.yaml")


@pytest.mark.parametrize(
    "mapping",
    [
        {"algorithm": "crc32"},
        {"workers": 0},
        {"workers": "2"},
        {"sections": ".text"},
        {"outputs": {"report": 3}},
    ],
)
def test_invalid_values_raise(mapping) -> None:
    with pytest.raises(ConfigError):
        FingerprintConfig.from_mapping(mapping)


def test_override_ignores_none() -> None:
    cfg = FingerprintConfig(workers=2).override(workers=None, algorithm="md5")
    assert cfg.workers == 2
    assert cfg.algorithm == "md5"

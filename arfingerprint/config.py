"""Run configuration loaded from YAML."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Any, Dict, Optional, Tuple

import yaml

from .compose import DEFAULT_SECTIONS
from .digest import DEFAULT_ALGORITHM, check_algorithm
from .errors import ConfigError


def _optional_path(value: Any, key: str) -> Optional[Path]:
    if value is None:
        return None
    if not isinstance(value, (str, Path)):
        raise ConfigError(f"'{key}' must be a path, got {type(value).__name__}")
    return Path(value)


@dataclass
class FingerprintConfig:
    """Settings for one fingerprint run."""

    algorithm: str = DEFAULT_ALGORITHM
    sections: Tuple[str, ...] = DEFAULT_SECTIONS
    workers: int = 1
    manifest: Optional[Path] = None
    report: Optional[Path] = None
    audit_log: Optional[Path] = None
    extra: Dict[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        self.algorithm = check_algorithm(self.algorithm)
        if isinstance(self.workers, bool) or not isinstance(self.workers, int) or self.workers < 1:
            raise ConfigError(f"'workers' must be a positive integer, got {self.workers!r}")
        if not isinstance(self.sections, (list, tuple)) or not all(isinstance(s, str) for s in self.sections):
            raise ConfigError("'sections' must be a list of section names")
        self.sections = tuple(self.sections)

    @classmethod
    def from_mapping(cls, mapping: Optional[Dict[str, Any]]) -> "FingerprintConfig":
        mapping = dict(mapping or {})
        outputs = mapping.pop("outputs", None) or {}
        audit = mapping.pop("audit", None) or {}
        return cls(
            algorithm=mapping.pop("algorithm", DEFAULT_ALGORITHM),
            sections=mapping.pop("sections", DEFAULT_SECTIONS),
            workers=mapping.pop("workers", 1),
            manifest=_optional_path(outputs.get("manifest"), "outputs.manifest"),
            report=_optional_path(outputs.get("report"), "outputs.report"),
            audit_log=_optional_path(audit.get("log"), "audit.log"),
            extra=mapping,
        )

    def override(self, **changes: Any) -> "FingerprintConfig":
        """Return a copy with every non-``None`` value in ``changes`` applied."""
        return replace(self, **{k: v for k, v in changes.items() if v is not None})


def load_config(path: Optional[Path]) -> FingerprintConfig:
    if path is None:
        return FingerprintConfig()
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")
    with path.open("r", encoding="utf-8") as fh:
        data = yaml.safe_load(fh)
    if data is not None and not isinstance(data, dict):
        raise ConfigError(f"Config file must contain a mapping: {path}")
    return FingerprintConfig.from_mapping(data)


__all__ = ["FingerprintConfig", "load_config"]

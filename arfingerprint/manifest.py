"""Tamper-evident JSON manifests of fingerprint runs."""

from __future__ import annotations

import hashlib
import json
import time
from pathlib import Path
from typing import Any, Dict, Optional

from .pipeline import FingerprintRun


def _canonical_hash(record: Dict[str, Any]) -> str:
    payload = json.dumps(record, sort_keys=True, separators=(",", ":")).encode()
    return hashlib.sha256(payload).hexdigest()


def write_manifest(
    run: FingerprintRun,
    destination: Path,
    *,
    archive_path: Optional[Path] = None,
) -> Path:
    """Write the member digests of ``run`` to ``destination``."""
    record = {
        "ts": time.time(),
        "archive": str(archive_path) if archive_path else None,
        **run.to_dict(),
    }
    destination.parent.mkdir(parents=True, exist_ok=True)
    destination.write_text(
        json.dumps({**record, "manifest_hash": _canonical_hash(record)}, indent=2),
        encoding="utf-8",
    )
    return destination


def load_manifest(path: Path) -> Dict[str, Any]:
    """Read a manifest back, rejecting one whose hash does not match."""
    data = json.loads(path.read_text(encoding="utf-8"))
    record = {k: v for k, v in data.items() if k != "manifest_hash"}
    if data.get("manifest_hash") != _canonical_hash(record):
        raise ValueError(f"Manifest hash mismatch: {path}")
    return data


def manifest_digests(manifest: Dict[str, Any]) -> Dict[str, str]:
    return {entry["name"]: entry["digest"] for entry in manifest.get("members", [])}


__all__ = ["load_manifest", "manifest_digests", "write_manifest"]

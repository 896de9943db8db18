"""Compare the member digests of two fingerprint runs."""

from __future__ import annotations

from pathlib import Path
from typing import Dict

import pandas as pd

from .manifest import load_manifest, manifest_digests

STATUSES = ("same", "changed", "only_a", "only_b")


def compare_digests(a: Dict[str, str], b: Dict[str, str]) -> pd.DataFrame:
    """Return one row per member name with both digests and a status."""

    left = pd.Series(a, name="digest_a", dtype="object")
    right = pd.Series(b, name="digest_b", dtype="object")
    table = pd.concat([left, right], axis=1).sort_index()
    table.index.name = "member"
    table = table.reset_index()

    status = pd.Series("changed", index=table.index)
    status[table["digest_a"] == table["digest_b"]] = "same"
    status[table["digest_b"].isna()] = "only_a"
    status[table["digest_a"].isna()] = "only_b"
    table["status"] = pd.Categorical(status, categories=list(STATUSES))
    return table


def compare_manifests(path_a: Path, path_b: Path) -> pd.DataFrame:
    return compare_digests(
        manifest_digests(load_manifest(path_a)),
        manifest_digests(load_manifest(path_b)),
    )


def is_reproducible(table: pd.DataFrame) -> bool:
    return bool((table["status"] == "same").all())


__all__ = ["STATUSES", "compare_digests", "compare_manifests", "is_reproducible"]

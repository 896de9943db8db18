"""Check that two fingerprint runs produced the same member digests."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import List, Optional

from arfingerprint.compare import compare_manifests, is_reproducible


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Compare two fingerprint manifests")
    parser.add_argument("manifest_a", type=Path)
    parser.add_argument("manifest_b", type=Path)
    parser.add_argument("--all", action="store_true", help="Also list members that match")
    parser.add_argument("--csv", type=Path, help="Write the full comparison table as CSV")
    args = parser.parse_args(argv)

    table = compare_manifests(args.manifest_a, args.manifest_b)
    if args.csv:
        table.to_csv(args.csv, index=False)
    shown = table if args.all else table[table["status"] != "same"]
    if not shown.empty:
        print(shown.to_string(index=False))
    counts = table["status"].value_counts().to_dict()
    print(", ".join(f"{status}={count}" for status, count in counts.items()))
    return 0 if is_reproducible(table) else 1


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())

"""Command-line entrypoint: print one fingerprint per archive member."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from .audit import AuditLogger
from .config import load_config
from .manifest import write_manifest
from .pipeline import fingerprint_archive
from .report_jinja import write_report


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="arfingerprint",
        description="Fingerprint the object files inside a static archive",
    )
    parser.add_argument("archive", type=Path, help="Path to the .a archive")
    parser.add_argument(
        "raw",
        nargs="?",
        help="Any value selects the raw token dump instead of a hash digest",
    )
    parser.add_argument("--config", type=Path, help="Path to a YAML config file")
    parser.add_argument("--algorithm", help="hashlib algorithm for digests (default: sha1)")
    parser.add_argument("--workers", type=int, help="Fingerprint members in N processes")
    parser.add_argument("--manifest", type=Path, help="Write a JSON manifest of the digests")
    parser.add_argument("--report", type=Path, help="Write a Markdown report")
    parser.add_argument("--audit-log", type=Path, help="Append audit events to this JSONL file")
    parser.add_argument("--debug", action="store_true", help="Enable debugging output on stderr")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.debug else logging.WARNING)

    cfg = load_config(args.config).override(
        algorithm=args.algorithm,
        workers=args.workers,
        manifest=args.manifest,
        report=args.report,
        audit_log=args.audit_log,
    )
    raw = args.raw is not None

    try:
        data = args.archive.read_bytes()
    except OSError as exc:
        print(f"arfingerprint: cannot read {args.archive}: {exc}", file=sys.stderr)
        return 1

    audit = AuditLogger(cfg.audit_log)
    audit.log(event="run_start", archive=str(args.archive), backend="raw" if raw else cfg.algorithm)

    run = fingerprint_archive(
        data,
        raw=raw,
        algorithm=cfg.algorithm,
        sections=cfg.sections,
        workers=cfg.workers,
        audit=audit,
    )
    output = run.render()
    if output:
        print(output)

    if cfg.manifest is not None:
        write_manifest(run, cfg.manifest, archive_path=args.archive)
        audit.log(event="manifest_written", path=str(cfg.manifest))
    if cfg.report is not None:
        write_report(run, cfg.report, archive_path=args.archive)
        audit.log(event="report_rendered", path=str(cfg.report))
    audit.log(event="run_complete", fingerprinted=len(run.fingerprints), skipped=len(run.skipped))
    return 0


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())

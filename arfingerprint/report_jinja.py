"""Jinja-based Markdown reports for fingerprint runs."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

from jinja2 import Environment, FileSystemLoader

from .pipeline import FingerprintRun

TEMPLATE_DIR = Path(__file__).parent / "report_templates"


def render_report(run: FingerprintRun, archive_path: Optional[Path] = None) -> str:
    """Render the Markdown summary of ``run``."""
    env = Environment(loader=FileSystemLoader(str(TEMPLATE_DIR)), keep_trailing_newline=True)
    template = env.get_template("fingerprint_report.md.j2")
    return template.render(run=run, archive=str(archive_path) if archive_path else None)


def write_report(run: FingerprintRun, destination: Path, archive_path: Optional[Path] = None) -> Path:
    destination.parent.mkdir(parents=True, exist_ok=True)
    destination.write_text(render_report(run, archive_path), encoding="utf-8")
    return destination


__all__ = ["render_report", "write_report"]

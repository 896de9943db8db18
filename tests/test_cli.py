import json
from pathlib import Path

from arfingerprint.cli import main

from builders import build_archive, simple_object


def test_prints_one_block_per_member(archive_path: Path, capsys) -> None:
    assert main([str(archive_path)]) == 0
    out = capsys.readouterr().out.splitlines()
    assert out[0] == "foo.o"
    assert len(out[1]) == 40


def test_second_argument_selects_raw_dump(archive_path: Path, capsys) -> None:
    assert main([str(archive_path), "anything"]) == 0
    out = capsys.readouterr().out
    assert out == "foo.o\n.text\n00000000 00000000\n: off 0 size 0\nfoo: off 0 size 8\n"


def test_non_archive_input(tmp_path: Path, capsys) -> None:
    path = tmp_path / "foo.o"
    path.write_bytes(simple_object())
    assert main([str(path)]) == 0
    assert capsys.readouterr().out == "Expected archive file.\n"


def test_missing_input_exits_nonzero(tmp_path: Path, capsys) -> None:
    assert main([str(tmp_path / "missing.a")]) == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "missing.a" in captured.err


def test_config_and_outputs(tmp_path: Path, capsys) -> None:
    archive = tmp_path / "libx.a"
    archive.write_bytes(build_archive([("x.o", simple_object()), ("y.txt", b"y\n")]))
    config = tmp_path / "fingerprint.yaml"
    config.write_text(
        "algorithm: sha256\n"
        "outputs:\n"
        f"  manifest: {tmp_path / 'out' / 'manifest.json'}\n"
        f"  report: {tmp_path / 'out' / 'report.md'}\n"
        "audit:\n"
        f"  log: {tmp_path / 'out' / 'audit.jsonl'}\n",
        encoding="utf-8",
    )

    assert main([str(archive), "--config", str(config)]) == 0
    out = capsys.readouterr().out.splitlines()
    assert out[0] == "x.o" and len(out[1]) == 64

    manifest = json.loads((tmp_path / "out" / "manifest.json").read_text(encoding="utf-8"))
    assert manifest["algorithm"] == "sha256"
    assert manifest["members"] == [{"name": "x.o", "digest": out[1]}]
    assert "`x.o`" in (tmp_path / "out" / "report.md").read_text(encoding="utf-8")

    events = [json.loads(line)["event"] for line in (tmp_path / "out" / "audit.jsonl").read_text().splitlines()]
    assert events[0] == "run_start"
    assert events[-1] == "run_complete"
    assert "manifest_written" in events and "report_rendered" in events


def test_command_line_overrides_config(tmp_path: Path, archive_path: Path, capsys) -> None:
    config = tmp_path / "fingerprint.yaml"
    config.write_text("algorithm: sha256\n", encoding="utf-8")
    assert main([str(archive_path), "--config", str(config), "--algorithm", "md5"]) == 0
    assert len(capsys.readouterr().out.splitlines()[1]) == 32

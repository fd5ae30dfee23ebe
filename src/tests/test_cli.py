"""
Tests for the census CLI.
"""

import json

import pytest
from text_census.cli import main, parse_config, print_summary, snapshot_to_json
from text_census.extraction import DEFAULT_MAX_FILE_SIZE_MB
from text_census.session import build_snapshot


# ===== FIXTURES =====


@pytest.fixture
def pdf_file(tmp_path, make_pdf):
    path = tmp_path / "report.pdf"
    path.write_bytes(make_pdf(["Hello world 2024", "Second page"]))
    return path


# ===== CONFIG TESTS =====


def test_parse_config_defaults():
    config = parse_config([])

    assert config["file"] is None
    assert config["format"] == "table"
    assert config["pages"] is False
    assert config["output"] is None
    assert config["max_size_mb"] == DEFAULT_MAX_FILE_SIZE_MB


def test_parse_config_overrides():
    config = parse_config(["file=a.pdf", "format=JSON", "pages=true", "max_size_mb=5"])

    assert config["file"] == "a.pdf"
    assert config["format"] == "json"
    assert config["pages"] is True
    assert config["max_size_mb"] == 5.0


def test_parse_config_merges_yaml_under_cli(tmp_path):
    config_path = tmp_path / "census.yaml"
    config_path.write_text("format: json\npages: true\nfile: from_yaml.pdf\n")

    config = parse_config([f"config={config_path}", "file=from_cli.pdf"])

    assert config["file"] == "from_cli.pdf"
    assert config["format"] == "json"
    assert config["pages"] is True


# ===== OUTPUT TESTS =====


def test_print_summary(capsys):
    snapshot = build_snapshot("doc.pdf", ["中文 text 42"])
    print_summary(snapshot)
    out = capsys.readouterr().out

    assert "doc.pdf" in out
    assert "English words" in out
    assert "Share of non-whitespace characters" in out


def test_print_summary_without_document(capsys):
    print_summary(None)
    assert "No statistics available" in capsys.readouterr().out


def test_snapshot_to_json():
    payload = snapshot_to_json(build_snapshot("doc.pdf", ["ab", "中"]))

    assert payload["file_name"] == "doc.pdf"
    assert payload["page_count"] == 2
    assert payload["counts"]["ideographCount"] == 1
    assert payload["counts"]["totalCount"] == 5
    assert [page["totalCount"] for page in payload["pages"]] == [2, 1]
    assert "text" not in payload


# ===== MAIN TESTS =====


def test_main_table(pdf_file, capsys):
    main([f"file={pdf_file}", "pages=true"])
    out = capsys.readouterr().out

    assert "Census for report.pdf (2 pages)" in out
    assert "Per-page breakdown" in out
    assert "Census completed successfully" in out


def test_main_json(pdf_file, capsys):
    main([f"file={pdf_file}", "format=json"])
    payload = json.loads(capsys.readouterr().out)

    assert payload["page_count"] == 2
    assert payload["counts"]["digitCount"] == 4
    assert payload["counts"]["latinWordCount"] == 4


def test_main_writes_output(pdf_file, tmp_path, capsys):
    output_path = tmp_path / "out" / "counts.json"
    main([f"file={pdf_file}", f"output={output_path}"])

    saved = json.loads(output_path.read_text(encoding="utf-8"))
    assert saved["file_name"] == "report.pdf"
    assert "Saved results" in capsys.readouterr().out


@pytest.mark.parametrize(
    "args,message",
    [
        ([], "file is required"),
        (["file=x.pdf", "format=xml"], "Unsupported format"),
    ],
)
def test_main_usage_errors(args, message, capsys):
    with pytest.raises(SystemExit) as exc_info:
        main(args)

    assert exc_info.value.code == 1
    assert message in capsys.readouterr().out


def test_main_missing_file(tmp_path, capsys):
    with pytest.raises(SystemExit) as exc_info:
        main([f"file={tmp_path / 'missing.pdf'}"])

    assert exc_info.value.code == 1
    assert "File not found" in capsys.readouterr().out


def test_main_unsupported_file(tmp_path, capsys):
    path = tmp_path / "notes.txt"
    path.write_text("just text", encoding="utf-8")

    with pytest.raises(SystemExit) as exc_info:
        main([f"file={path}"])

    assert exc_info.value.code == 1
    assert "Unsupported file type" in capsys.readouterr().out

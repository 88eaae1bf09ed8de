import logging
from pathlib import Path
from unittest.mock import patch

import pytest

from sortcheckstyle.config.models import AppSettings, NormalizeOptions, OutputSettings
from sortcheckstyle.model import DocumentError, parse_document
from sortcheckstyle.pipeline import run_pipeline

UNSORTED = b'<?xml version="1.0" encoding="UTF-8"?>\n<module name="Checker"><module name="TreeWalker"/><property name="charset" value="UTF-8"/><module name="FileTabCharacter"/></module>'
SORTED = b'<?xml version="1.0" encoding="UTF-8"?>\n<module name="Checker"><module name="FileTabCharacter"/><module name="TreeWalker"/><property name="charset" value="UTF-8"/></module>'


def _names(xml_bytes):
    root = parse_document(xml_bytes).root
    return [child.get("name") for child in root.element_children]


@pytest.fixture
def source(tmp_path):
    path = tmp_path / "checks.xml"
    path.write_bytes(UNSORTED)
    return path


def test_writes_output_file(source, tmp_path):
    target = tmp_path / "out.xml"
    result = run_pipeline(AppSettings(), input_file=source, output_file=target)

    assert result.changed
    assert result.written_to == target
    assert _names(target.read_bytes()) == ["FileTabCharacter", "TreeWalker", "charset"]
    assert source.read_bytes() == UNSORTED


def test_default_file_names(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    Path("checkstyle-in.xml").write_bytes(UNSORTED)

    result = run_pipeline(AppSettings())

    assert result.source == "checkstyle-in.xml"
    assert result.written_to == Path("checkstyle-out.xml")
    assert Path("checkstyle-out.xml").exists()


def test_in_place(source):
    result = run_pipeline(AppSettings(), input_file=source, in_place=True)
    assert result.written_to == source
    assert _names(source.read_bytes()) == ["FileTabCharacter", "TreeWalker", "charset"]


def test_stdout_leaves_writing_to_caller(source, tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    result = run_pipeline(AppSettings(), input_file=source, output_file=Path("-"))
    assert result.written_to is None
    assert not Path("-").exists()
    assert result.output.startswith(b"<?xml")


def test_check_mode_writes_nothing(source, tmp_path, caplog):
    target = tmp_path / "out.xml"
    with caplog.at_level(logging.INFO, logger="sortcheckstyle"):
        result = run_pipeline(AppSettings(), input_file=source, output_file=target, check=True)
    assert result.changed
    assert result.written_to is None
    assert not target.exists()
    assert "not in canonical form (would be sorted)" in caplog.text


def test_canonical_input_is_reported(tmp_path, caplog):
    source = tmp_path / "sorted.xml"
    source.write_bytes(SORTED)
    with caplog.at_level(logging.INFO, logger="sortcheckstyle"):
        result = run_pipeline(AppSettings(), input_file=source, output_file=tmp_path / "out.xml")
    assert not result.changed
    assert "already in canonical form" in caplog.text


def test_modified_input_is_reported(source, tmp_path, caplog):
    settings = AppSettings(normalize=NormalizeOptions(compress=True))
    with caplog.at_level(logging.INFO, logger="sortcheckstyle"):
        run_pipeline(settings, input_file=source, output_file=tmp_path / "out.xml")
    assert "was modified: compressed and sorted" in caplog.text


def test_output_settings_are_applied(source, tmp_path):
    settings = AppSettings(output=OutputSettings(pretty_print=True, xml_declaration=False))
    result = run_pipeline(settings, input_file=source, output_file=tmp_path / "out.xml")
    assert result.output.startswith(b"<module")
    assert b'\n  <module name="FileTabCharacter"/>' in result.output


@patch("sortcheckstyle.pipeline.fetch_document")
def test_uri_input(mock_fetch, tmp_path):
    mock_fetch.return_value = UNSORTED
    target = tmp_path / "out.xml"

    result = run_pipeline(AppSettings(), uri="https://example.org/checks.xml", output_file=target)

    mock_fetch.assert_called_once_with("https://example.org/checks.xml", timeout=30.0, user_agent="sortcheckstyle")
    assert result.source == "https://example.org/checks.xml"
    assert _names(target.read_bytes()) == ["FileTabCharacter", "TreeWalker", "charset"]


def test_malformed_input_raises(tmp_path):
    source = tmp_path / "broken.xml"
    source.write_bytes(b"<module>")
    with pytest.raises(DocumentError):
        run_pipeline(AppSettings(), input_file=source, output_file=tmp_path / "out.xml")


def test_missing_input_raises(tmp_path):
    with pytest.raises(OSError):
        run_pipeline(AppSettings(), input_file=tmp_path / "missing.xml", output_file=tmp_path / "out.xml")


def test_in_place_failure_keeps_original(source):
    with patch("sortcheckstyle.pipeline.os.replace", side_effect=OSError("disk full")):
        with pytest.raises(OSError, match="disk full"):
            run_pipeline(AppSettings(), input_file=source, in_place=True)
    assert source.read_bytes() == UNSORTED
    assert [p.name for p in source.parent.iterdir()] == [source.name]


def test_in_place_keeps_file_mode(source):
    source.chmod(0o640)
    run_pipeline(AppSettings(), input_file=source, in_place=True)
    assert source.stat().st_mode & 0o777 == 0o640

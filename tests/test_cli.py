import json

import pytest

from threadline.cli import import_cli


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    monkeypatch.delenv("THREADLINE_REMOVE_CODE_BLOCKS", raising=False)
    monkeypatch.delenv("THREADLINE_LOG_LEVEL", raising=False)


def _write_archive(path, conversations):
    path.write_text(json.dumps(conversations), encoding="utf-8")
    return str(path)


def test_writes_cleaned_archive(tmp_path, chain):
    archive = _write_archive(tmp_path / "export.json", [
        chain('a', [('user', 'Show me'), ('assistant', 'Here ```code``` you go')]),
    ])
    out_dir = tmp_path / "out"

    assert import_cli([archive, "-o", str(out_dir), "--remove-code-blocks"]) == 0

    saved = json.loads((out_dir / "export_cleaned.json").read_text(encoding="utf-8"))
    assert [m['content'] for m in saved[0]['messages']] == ['Show me', 'Here  you go']


def test_missing_input_fails(tmp_path):
    assert import_cli([str(tmp_path / "absent.json"), "-o", str(tmp_path)]) == 1


def test_malformed_archive_fails(tmp_path):
    archive = _write_archive(tmp_path / "bad.json", {"mapping": {}})
    assert import_cli([archive, "-o", str(tmp_path / "out")]) == 1


def test_invalid_log_level_env_fails_cleanly(tmp_path, chain, monkeypatch):
    monkeypatch.setenv("THREADLINE_LOG_LEVEL", "LOUD")
    archive = _write_archive(tmp_path / "export.json", [chain('a', [('user', 'hi')])])
    out_dir = tmp_path / "out"

    assert import_cli([archive, "-o", str(out_dir)]) == 1
    assert not out_dir.exists()


def test_invalid_code_block_env_fails_cleanly(tmp_path, chain, monkeypatch):
    monkeypatch.setenv("THREADLINE_REMOVE_CODE_BLOCKS", "sometimes")
    archive = _write_archive(tmp_path / "export.json", [chain('a', [('user', 'hi')])])

    assert import_cli([archive, "-o", str(tmp_path / "out")]) == 1


def test_empty_result_still_writes_file(tmp_path, chain):
    archive = _write_archive(tmp_path / "system.json", [chain('s', [('system', 'setup')])])
    out_dir = tmp_path / "out"

    assert import_cli([archive, "-o", str(out_dir)]) == 0
    assert json.loads((out_dir / "system_cleaned.json").read_text(encoding="utf-8")) == []

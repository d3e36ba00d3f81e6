import json
from importlib import resources
from pathlib import Path

import pytest

from farsifake import __version__
from farsifake.cli import main


def run(args):
    assert main(args) == 0


def bundled_words():
    text = (resources.files("farsifake") / "data" / "fa.dic").read_text(encoding="utf-8")
    return {w for w in text.splitlines() if w.strip()}


def write_dict(tmp_path: Path) -> Path:
    d = tmp_path / "words.dic"
    d.write_text("الف\nب\nج\n", encoding="utf-8")
    return d


def test_word_mode_bundled(tmp_path: Path):
    out = tmp_path / "out.txt"
    run(["--times", "5", "--seed", "3", "--output", str(out)])
    lines = out.read_text(encoding="utf-8").splitlines()
    assert len(lines) == 5
    assert set(lines) <= bundled_words()


def test_sentence_mode_custom_dict(tmp_path: Path):
    out = tmp_path / "out.txt"
    d = write_dict(tmp_path)
    run(["--mode", "sentence", "--count", "4", "--times", "3", "--dict", str(d), "--output", str(out)])
    lines = out.read_text(encoding="utf-8").splitlines()
    assert len(lines) == 3
    for line in lines:
        tokens = line.split(" ")
        assert len(tokens) == 4
        assert set(tokens) <= {"الف", "ب", "ج"}


def test_paragraph_mode_range(tmp_path: Path):
    out = tmp_path / "out.txt"
    d = write_dict(tmp_path)
    run(["--mode", "paragraph", "--range", "2,5", "--times", "10", "--dict", str(d), "--lines", "3", "--output", str(out)])
    for line in out.read_text(encoding="utf-8").splitlines():
        assert 2 <= len(line.split(" ")) <= 5


def test_stdout_and_seed_reproducible(capsys):
    run(["--mode", "sentence", "--count", "6", "--seed", "77"])
    first = capsys.readouterr().out
    run(["--mode", "sentence", "--count", "6", "--seed", "77"])
    second = capsys.readouterr().out
    assert first == second
    assert len(first.strip().split(" ")) == 6


def test_append_output(tmp_path: Path):
    out = tmp_path / "out.txt"
    out.write_text("keep\n", encoding="utf-8")
    run(["--times", "2", "--append", "--output", str(out)])
    lines = out.read_text(encoding="utf-8").splitlines()
    assert lines[0] == "keep"
    assert len(lines) == 3


def test_jump_from_start_flag(tmp_path: Path):
    out = tmp_path / "out.txt"
    d = tmp_path / "one.dic"
    d.write_text("تنها\n", encoding="utf-8")
    run(["--dict", str(d), "--jump-from-start", "--times", "4", "--output", str(out)])
    assert out.read_text(encoding="utf-8") == "تنها\n" * 4


def test_config_json_applies_defaults(tmp_path: Path):
    d = write_dict(tmp_path)
    out = tmp_path / "out.txt"
    cfg = {"mode": "sentence", "count": 2, "times": 3, "dict_path": str(d), "unknown_key": 1}
    cpath = tmp_path / "cfg.json"
    cpath.write_text(json.dumps(cfg), encoding="utf-8")
    run(["--config", str(cpath), "--output", str(out)])
    lines = out.read_text(encoding="utf-8").splitlines()
    assert len(lines) == 3
    assert all(len(line.split(" ")) == 2 for line in lines)


def test_config_toml_with_flag_spelling(tmp_path: Path):
    out = tmp_path / "out.txt"
    cpath = tmp_path / "cfg.toml"
    cpath.write_text('mode = "paragraph"\nrange = "3,3"\nseed = 5\n', encoding="utf-8")
    run(["--config", str(cpath), "--output", str(out)])
    assert len(out.read_text(encoding="utf-8").split()) == 3


def test_config_yaml(tmp_path: Path):
    pytest.importorskip("yaml")
    out = tmp_path / "out.txt"
    cpath = tmp_path / "cfg.yaml"
    cpath.write_text("times: 4\n", encoding="utf-8")
    run(["--config", str(cpath), "--output", str(out)])
    assert len(out.read_text(encoding="utf-8").splitlines()) == 4


def test_broken_config_is_ignored(tmp_path: Path, capsys):
    out = tmp_path / "out.txt"
    cpath = tmp_path / "cfg.json"
    cpath.write_text("{not json", encoding="utf-8")
    run(["--config", str(cpath), "--output", str(out)])
    assert "Failed to load config" in capsys.readouterr().err
    assert len(out.read_text(encoding="utf-8").splitlines()) == 1


def test_missing_dict_exit_code(tmp_path: Path):
    assert main(["--dict", str(tmp_path / "missing.dic")]) == 2


def test_invalid_paragraph_range_exit_code(tmp_path: Path):
    out = tmp_path / "out.txt"
    assert main(["--mode", "paragraph", "--range", "5,2", "--output", str(out)]) == 2
    assert main(["--mode", "sentence", "--count", "0", "--output", str(out)]) == 2


def test_malformed_range_is_usage_error():
    with pytest.raises(SystemExit):
        main(["--mode", "paragraph", "--range", "five"])


def test_version(capsys):
    assert main(["--version"]) == 0
    captured = capsys.readouterr()
    assert __version__ in captured.out
    assert f"farsifake v{__version__}" in captured.err


def test_log_file_records_run(tmp_path: Path):
    log = tmp_path / "run.log"
    out = tmp_path / "out.txt"
    run(["--log-level", "INFO", "--log-file", str(log), "--output", str(out)])
    assert "start: mode=word" in log.read_text(encoding="utf-8")


def test_config_json_dict_flag_spelling(tmp_path: Path, capsys):
    d = tmp_path / "w.dic"
    d.write_text("zz\n", encoding="utf-8")
    out = tmp_path / "out.txt"
    cpath = tmp_path / "cfg.json"
    cpath.write_text(json.dumps({"dict": str(d), "jump-from-start": True, "times": 2, "bogus": 1}), encoding="utf-8")
    run(["--config", str(cpath), "--output", str(out)])
    assert out.read_text(encoding="utf-8") == "zz\nzz\n"
    assert "Ignoring unknown config key: bogus" in capsys.readouterr().err


@pytest.mark.parametrize("word_range", ["1e999,5", "2^10,20", "3", "a,b"])
def test_non_integer_range_is_usage_error(word_range):
    with pytest.raises(SystemExit) as info:
        main(["--mode", "paragraph", "--range", word_range])
    assert info.value.code == 2


@pytest.mark.parametrize("flag", [["--lines", "10"], ["--encoding", "latin-1"]])
def test_dict_options_without_dict_are_usage_errors(flag):
    with pytest.raises(SystemExit) as info:
        main(flag)
    assert info.value.code == 2


def test_unknown_encoding_exit_code(tmp_path: Path):
    d = write_dict(tmp_path)
    assert main(["--dict", str(d), "--encoding", "no-such-codec"]) == 2

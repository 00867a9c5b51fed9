import json
import logging
from pathlib import Path

import pytest

from wordladder import cli


def extract_json_from_stdout(output: str) -> str:
    """Return the JSON payload from stdout that may include log lines."""
    return output[output.find("{") : output.rfind("}") + 1]


def test_prints_ladders_and_summary(lexicon_file: Path, capsys) -> None:
    cli.main([str(lexicon_file), "hit", "log"])
    out = capsys.readouterr().out

    assert "hit -> hot -> hog -> log" in out
    assert "hit -> hot -> lot -> log" in out
    assert out.index("hog -> log") < out.index("lot -> log")
    assert "Found 2 ladders of length 4" in out


def test_single_ladder_summary_is_singular(lexicon_file: Path, capsys) -> None:
    cli.main([str(lexicon_file), "hit", "cog"])
    out = capsys.readouterr().out
    assert "hit -> hot -> hog -> cog" in out
    assert "Found 1 ladder of length 4" in out


def test_no_ladder(tmp_path: Path, capsys) -> None:
    path = tmp_path / "words.txt"
    path.write_text("hit\nhot\ndog\ncog\nlog\n", encoding="utf-8")

    cli.main([str(path), "hit", "cog"])
    out = capsys.readouterr().out
    assert "No ladder found from 'hit' to 'cog'" in out


def test_json_output(lexicon_file: Path, capsys) -> None:
    cli.main(["--quiet", str(lexicon_file), "hit", "log", "--json"])
    payload = json.loads(extract_json_from_stdout(capsys.readouterr().out))
    assert payload == {
        "start": "hit",
        "target": "log",
        "ladders": [
            ["hit", "hot", "hog", "log"],
            ["hit", "hot", "lot", "log"],
        ],
    }


def test_limit_truncates_output(lexicon_file: Path, capsys) -> None:
    cli.main([str(lexicon_file), "hit", "log", "--limit", "1"])
    out = capsys.readouterr().out
    assert "hit -> hot -> hog -> log" in out
    assert "hit -> hot -> lot -> log" not in out
    assert "Found 2 ladders of length 4" in out
    assert "... and 1 more" in out


def test_limit_applies_to_json(lexicon_file: Path, capsys) -> None:
    cli.main(["--quiet", str(lexicon_file), "hit", "log", "--json", "-n", "0"])
    payload = json.loads(extract_json_from_stdout(capsys.readouterr().out))
    assert payload["ladders"] == []


def test_negative_limit_rejected(lexicon_file: Path) -> None:
    with pytest.raises(SystemExit) as exc_info:
        cli.main([str(lexicon_file), "hit", "log", "--limit", "-1"])
    assert exc_info.value.code == 2


def test_missing_lexicon_file(tmp_path: Path, capsys) -> None:
    with pytest.raises(SystemExit) as exc_info:
        cli.main([str(tmp_path / "missing.txt"), "hit", "log"])
    assert exc_info.value.code == 1
    assert "Failed to open file" in capsys.readouterr().out


def test_unreadable_lexicon_file(tmp_path: Path, capsys) -> None:
    path = tmp_path / "broken.txt"
    path.write_bytes(b"hit\n\xff\xfe\n")
    with pytest.raises(SystemExit) as exc_info:
        cli.main([str(path), "hit", "hot"])
    assert exc_info.value.code == 1
    assert "Error reading file" in capsys.readouterr().out


def test_length_mismatch_is_reported(lexicon_file: Path, capsys) -> None:
    with pytest.raises(SystemExit) as exc_info:
        cli.main([str(lexicon_file), "hit", "abcd"])
    assert exc_info.value.code == 1
    assert "must have the same length" in capsys.readouterr().out


@pytest.mark.parametrize("start,target", [("zzz", "hit"), ("hit", "zzz")])
def test_word_missing_from_lexicon_is_reported(
    lexicon_file: Path, capsys, start: str, target: str
) -> None:
    with pytest.raises(SystemExit) as exc_info:
        cli.main([str(lexicon_file), start, target])
    assert exc_info.value.code == 1
    assert "'zzz' is not in the lexicon" in capsys.readouterr().out


def test_no_arguments_prints_help(capsys) -> None:
    with pytest.raises(SystemExit) as exc_info:
        cli.main([])
    assert exc_info.value.code == 0
    assert "usage: wordladder" in capsys.readouterr().out


def test_verbose_and_quiet_set_log_level(lexicon_file: Path) -> None:
    root = logging.getLogger("wordladder")

    cli.main(["--verbose", str(lexicon_file), "hit", "hot"])
    assert root.level == logging.DEBUG

    cli.main(["--quiet", str(lexicon_file), "hit", "hot"])
    assert root.level == logging.WARNING

    cli.main([str(lexicon_file), "hit", "hot"])
    assert root.level == logging.INFO


def test_format_duration() -> None:
    assert cli._format_duration(0.123) == "123.0 ms"
    assert cli._format_duration(1.234) == "1.23 s"
    assert cli._format_duration(75.2) == "1m 15.2s"

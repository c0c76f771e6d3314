import json
from pathlib import Path

import pytest

import cli


def test_parse_then_serialize(tmp_path: Path) -> None:
    source = tmp_path / "question.txt"
    source.write_text("Q?\n*A\nB:fb:no", encoding="utf-8")
    parsed = tmp_path / "question.json"

    cli.main(["parse", str(source), "--output", str(parsed)])
    payload = json.loads(parsed.read_text(encoding="utf-8"))
    assert payload["question"] == "<p>Q?</p>\n"
    assert payload["options"][1]["hintAndFeedback"] == {
        "chosenFeedback": "fb",
        "notChosenFeedback": "no",
    }

    restored = tmp_path / "restored.txt"
    cli.main(["serialize", str(parsed), "--output", str(restored)])
    assert restored.read_text(encoding="utf-8") == "Q?\n*A\nB:fb:no"


def test_help_to_stdout(capsys: pytest.CaptureFixture[str]) -> None:
    cli.main(["help", "--lang", "en"])
    out = capsys.readouterr().out
    assert out.startswith('<div class="header">')


def test_serialize_rejects_non_object(tmp_path: Path) -> None:
    source = tmp_path / "list.json"
    source.write_text("[]", encoding="utf-8")
    with pytest.raises(SystemExit):
        cli.main(["serialize", str(source)])

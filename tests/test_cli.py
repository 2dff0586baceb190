import json
import subprocess
import sys
from pathlib import Path

import pytest

from chatjson2h.cli import main
from chatjson2h.errors import SchemaError

PROJECT_ROOT = Path(__file__).resolve().parents[1]

USAGE = "Usage: chatjson2h [options file name] [input file name] [output file name]\n"

CATALOG = {
    "languages": [{"id": "en", "name": "English"}],
    "chatMessages": [{"uniqueName": "Greeting", "content": {"en": {"comment": "hi", "processed": "Hello"}}}],
}


def _write_json(path, document):
    path.write_text(json.dumps(document), encoding="utf-8")
    return path


@pytest.fixture
def files(tmp_path):
    options = _write_json(tmp_path / "options.json", {})
    messages = _write_json(tmp_path / "messages.json", CATALOG)
    return options, messages, tmp_path / "ChatMessages.hpp"


@pytest.mark.parametrize("argv", [
    ["chatjson2h"],
    ["chatjson2h", "options.json"],
    ["chatjson2h", "options.json", "messages.json"],
])
def test_too_few_arguments_prints_usage_and_succeeds(argv, capsys):
    assert main(argv) == 0
    assert capsys.readouterr().out == USAGE


def test_generates_the_header(files, capsys):
    options, messages, output = files
    assert main(["chatjson2h", str(options), str(messages), str(output)]) == 0
    assert capsys.readouterr().out == ""
    with open(output, "r", encoding="utf-8", newline="") as f:
        text = f.read()
    assert text.startswith("#pragma once\n\n")
    assert "struct ChatMessageBase {};" in text
    assert "// \"hi\"\n" in text
    assert "std::array<std::string_view, 1> result;" in text
    assert "\t\tresult[0] = FMT_COMPILE(\"Hello\");\n" in text
    assert text.endswith("} inline constexpr Greeting;\n\n")


def test_missing_options_file(files, capsys):
    _, messages, output = files
    missing = output.parent / "missing.json"
    assert main(["chatjson2h", str(missing), str(messages), str(output)]) == 0
    assert capsys.readouterr().out == f"Error: could not open \"{missing}\" options file for reading.\n"
    assert not output.exists()


def test_missing_input_file(files, capsys):
    options, _, output = files
    missing = output.parent / "missing.json"
    assert main(["chatjson2h", str(options), str(missing), str(output)]) == 0
    assert capsys.readouterr().out == f"Error: could not open \"{missing}\" input file for reading.\n"
    assert not output.exists()


def test_unwritable_output_file(files, capsys):
    options, messages, output = files
    target = output.parent / "no" / "such" / "dir.hpp"
    assert main(["chatjson2h", str(options), str(messages), str(target)]) == 0
    assert capsys.readouterr().out == f"Error: could not open \"{target}\" file for writing.\n"


def test_schema_error_propagates_and_writes_nothing(files):
    options, messages, output = files
    _write_json(messages, {"languages": [], "chatMessages": "nope"})
    with pytest.raises(SchemaError):
        main(["chatjson2h", str(options), str(messages), str(output)])
    assert output.read_text(encoding="utf-8") == ""


def test_bad_options_propagate(files):
    options, messages, output = files
    _write_json(options, {"usePragmaOnce": "yes"})
    with pytest.raises(SchemaError, match="usePragmaOnce"):
        main(["chatjson2h", str(options), str(messages), str(output)])


def test_duplicate_names_are_generated_silently(files, capsys):
    options, messages, output = files
    _write_json(messages, dict(CATALOG, chatMessages=CATALOG["chatMessages"] * 2))
    assert main(["chatjson2h", str(options), str(messages), str(output)]) == 0
    assert capsys.readouterr().out == ""
    assert output.read_text(encoding="utf-8").count("inline constexpr Greeting;") == 2


def test_non_utf8_bytes_pass_through(files):
    options, messages, output = files
    raw = json.dumps(CATALOG).encode("utf-8").replace(b"Hello", b"H\xe9llo")
    messages.write_bytes(raw)
    assert main(["chatjson2h", str(options), str(messages), str(output)]) == 0
    assert b"FMT_COMPILE(\"H\xe9llo\")" in output.read_bytes()


def test_module_entry_point_exits_zero_on_usage():
    result = subprocess.run(
        [sys.executable, "-m", "chatjson2h"],
        cwd=PROJECT_ROOT, capture_output=True, text=True,
    )
    assert result.returncode == 0
    assert result.stdout.startswith("Usage: ")

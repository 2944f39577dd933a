import json

from plugins.scientific_calculator.cli import main


def _run(capsys, *argv):
    code = main(list(argv))
    return code, json.loads(capsys.readouterr().out)


def test_eval_command(capsys):
    code, payload = _run(capsys, "eval", "2 + 3 * 4")
    assert code == 0
    assert payload["result"] == 14
    assert payload["angle_mode"] == "degree"


def test_eval_defaults_to_degrees_and_substitutes_pi(capsys):
    _, payload = _run(capsys, "eval", "sin(90)")
    assert payload["display"] == "1"
    _, payload = _run(capsys, "eval", "cos(pi)", "--angle-mode", "radian")
    assert payload["display"] == "-1"


def test_eval_reports_errors(capsys):
    code, payload = _run(capsys, "eval", "(1")
    assert code == 1
    assert payload["error"]["code"] == "unbalanced_parentheses"

    code, payload = _run(capsys, "eval", "(1", "--lenient")
    assert code == 0
    assert payload["result"] == 1


def test_tokens_command(capsys):
    code, payload = _run(capsys, "tokens", "1 + 2 * 3")
    assert code == 0
    assert [token["value"] for token in payload["postfix"]] == [1.0, 2.0, 3.0, "*", "+"]


def test_functions_command(capsys):
    _, payload = _run(capsys, "functions")
    names = {name for item in payload["functions"] for name in item["names"]}
    assert {"sqrt", "√", "fact"}.issubset(names)


def test_eval_rejects_superscript_digits(capsys):
    code, payload = _run(capsys, "eval", "2²")
    assert code == 1
    assert payload["error"]["code"] == "unrecognized_character"

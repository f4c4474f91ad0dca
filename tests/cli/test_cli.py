import json

from textseq.cli.cli import main


def test_demo_prints_display_index_and_usage(capsys):
    assert main(["demo"]) == 0

    lines = capsys.readouterr().out.splitlines()
    assert lines == ["[Java, Python, C, C++, Fortran]", "2", "100.0"]


def test_no_command_prints_help(capsys):
    assert main([]) == 0
    assert "usage" in capsys.readouterr().out.lower()


def test_run_from_yaml_grows_capacity(tmp_path, capsys):
    path = tmp_path / "run.yaml"
    path.write_text("values: [a, b, c, d, e]\ncapacity: 4\nlookup: c\n")

    assert main(["run", str(path), "--json"]) == 0

    summary = json.loads(capsys.readouterr().out)
    assert summary == {
        "display": "[a, b, c, d, e]",
        "length": 5,
        "capacity": 5,
        "usage": 100.0,
        "index_of": 2,
    }


def test_run_plain_output_omits_lookup_when_unset(tmp_path, capsys):
    path = tmp_path / "run.json"
    path.write_text(json.dumps({"values": ["x", "y"]}))

    assert main(["run", str(path)]) == 0

    out = capsys.readouterr().out
    assert "display: [x, y]" in out
    assert "usage: 50.0" in out
    assert "index_of" not in out

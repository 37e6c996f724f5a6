import json

import matplotlib

matplotlib.use("Agg")

from OrientTSP.__main__ import main
from OrientTSP.solvers.base import DEFAULT_SEED


def _write(tmp_path, payload):
    path = tmp_path / "problem.json"
    path.write_text(json.dumps(payload), encoding="utf-8")
    return path


def test_cli_orders_segments_from_object(tmp_path, capsys):
    problem = _write(
        tmp_path,
        {"kind": "segment", "start": [0, 0], "elements": [[[5, 0], [6, 0]], [[0, 0], [1, 0]]]},
    )

    assert main([str(problem)]) == 0

    output = json.loads(capsys.readouterr().out)
    assert output["order"] == [1, 0]
    assert output["orientations"] == [0, 0]
    assert output["cost"] == 4.0
    assert output["seed"] == DEFAULT_SEED


def test_cli_flags_override_file(tmp_path):
    problem = _write(tmp_path, [[3, 0], [0, 0], [1, 0], [2, 0]])
    result_file = tmp_path / "out.json"

    code = main([str(problem), "--kind", "point", "--start", "0", "0", "--seed", "5", "--output", str(result_file)])

    assert code == 0
    output = json.loads(result_file.read_text(encoding="utf-8"))
    assert sorted(output["order"]) == [0, 1, 2, 3]
    assert output["orientations"] == [0, 0, 0, 0]
    assert output["seed"] == 5


def test_cli_writes_plot(tmp_path):
    problem = _write(tmp_path, {"kind": "polygon", "elements": [[[0, 0], [1, 0], [1, 1]], [[5, 5], [6, 5], [6, 6]]]})
    figure = tmp_path / "path.png"

    assert main([str(problem), "--plot", str(figure), "--output", str(tmp_path / "out.json")]) == 0
    assert figure.exists()


def test_cli_reports_element_without_orientations(tmp_path, capsys):
    problem = _write(tmp_path, {"kind": "polygon", "elements": [[[0, 0], [1, 1]], []]})

    assert main([str(problem)]) == 2
    assert "No orientations" in capsys.readouterr().err


def test_cli_reports_bad_input(tmp_path, capsys):
    problem = _write(tmp_path, {"shapes": []})

    assert main([str(problem)]) == 2
    assert "error" in capsys.readouterr().err


def test_cli_reports_unknown_kind_in_file(tmp_path, capsys):
    problem = _write(tmp_path, {"kind": "spline", "elements": []})

    assert main([str(problem)]) == 2
    assert "Unknown orientation strategy" in capsys.readouterr().err


def test_cli_reports_malformed_segment(tmp_path, capsys):
    problem = _write(tmp_path, {"kind": "segment", "elements": [5, [[0, 0], [1, 0]]]})

    assert main([str(problem)]) == 2
    assert "segment" in capsys.readouterr().err


def test_cli_reports_malformed_polyline(tmp_path, capsys):
    problem = _write(tmp_path, {"kind": "polyline", "elements": [[[0, 0], [1, 0]], 5]})

    assert main([str(problem)]) == 2
    assert "polyline" in capsys.readouterr().err


def test_cli_creates_missing_output_directory(tmp_path):
    problem = _write(tmp_path, [[[0, 0], [1, 0]], [[5, 0], [6, 0]]])
    result_file = tmp_path / "missing" / "nested" / "out.json"

    assert main([str(problem), "--output", str(result_file)]) == 0
    assert json.loads(result_file.read_text(encoding="utf-8"))["order"] == [0, 1]


def test_cli_reports_unwritable_output(tmp_path, capsys):
    problem = _write(tmp_path, [[[0, 0], [1, 0]]])
    blocker = tmp_path / "blocker"
    blocker.write_text("", encoding="utf-8")

    assert main([str(problem), "--output", str(blocker / "out.json")]) == 2
    assert "error" in capsys.readouterr().err

import io

import pytest

from routefinder.cli import format_path, main, run_route_finder

TEST_DATA = """5 6
1 20.45 -18.67
2 25.37 -15.24
3 37.19 -18.23
4 30.0 -50.0
5 40.91 -80.66
1 2 3.5
2 3 4.0
3 5 10.0
2 4 30.0
4 2 5.0
5 4 16.7
"""


@pytest.fixture
def data_file(tmp_path):
    path = tmp_path / "testData.txt"
    path.write_text(TEST_DATA)
    return str(path)


def run(lines):
    output = io.StringIO()
    run_route_finder(io.StringIO("".join(line + "\n" for line in lines)), output)
    return output.getvalue()


def test_format_path():
    assert format_path([(1.5, 2.0), (3.0, 4.25)]) == "(1.5, 2) -> (3, 4.25)"
    assert format_path([]) == ""


def test_quit_at_file_prompt():
    out = run(["q"])
    assert out.endswith("Exiting program.\n")
    assert "Graph loaded" not in out


def test_missing_file(tmp_path):
    out = run([str(tmp_path / "nope.txt")])
    assert "Error: file not found. Try running again with correct graph." in out


def test_shortest_path_query(data_file):
    out = run([data_file, "25.37 -15.24", "40.91 -80.66", "q"])
    assert f"Graph loaded successfully from {data_file}" in out
    assert "Start node found!" in out
    assert "End node found!" in out
    assert "The shortest path from (25.37, -15.24) to (40.91, -80.66) is: " in out
    assert "(25.37, -15.24) -> (37.19, -18.23) -> (40.91, -80.66) with a weight of: 14" in out
    assert out.endswith("Exiting program.\n")


def test_no_path_reported(data_file):
    out = run([data_file, "40.91 -80.66", "20.45 -18.67", "q"])
    assert "No path between these points" in out


def test_unknown_start_then_quit(data_file):
    out = run([data_file, "1 1", "q"])
    assert "Cannot find coordinates..." in out
    assert out.endswith("Exiting... Thanks for using our program!!\n")
    assert "Start node found!" not in out


def test_unknown_end_then_retry(data_file):
    out = run([data_file, "25.37 -15.24", "garbage", "37.19 -18.23", "q"])
    assert out.count("Cannot find coordinates...") == 1
    assert "End node found!" in out
    assert "(25.37, -15.24) -> (37.19, -18.23) with a weight of: 4" in out


def test_end_of_input_stops(data_file):
    out = run([data_file])
    assert out.endswith("Exiting program.\n")


def test_main_uses_standard_streams(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("q\n"))
    assert main([]) == 0
    captured = capsys.readouterr().out
    assert "=== Welcome to Denison Route Finder! ===" in captured
    assert captured.endswith("Exiting program.\n")
import pytest

from geometry import Point
from program import generate_points, main, read_points


INPUT6 = """6
19000  10000
18000  10000
32000  10000
21000  10000
 1234   5678
14000  10000
"""


@pytest.fixture
def input6(tmp_path):
    path = tmp_path / "input6.txt"
    path.write_text(INPUT6, encoding="utf-8")
    return path


def test_read_points(input6):
    points = read_points(str(input6))
    assert len(points) == 6
    assert points[0] == Point(19000, 10000)
    assert points[4] == Point(1234, 5678)


@pytest.mark.parametrize("method", ["fast", "brute"])
def test_main_file(input6, method, capsys):
    assert main([str(input6), "--method", method]) == 0

    out = capsys.readouterr().out.splitlines()
    assert out == ["(14000, 10000) -> (32000, 10000)", "1"]


def test_main_duplicates(tmp_path, capsys):
    path = tmp_path / "dup.txt"
    path.write_text("3\n1 1\n2 2\n1 1\n", encoding="utf-8")

    assert main([str(path)]) == 1
    assert "duplicate" in capsys.readouterr().err


def test_main_missing_file(tmp_path, capsys):
    assert main([str(tmp_path / "nope.txt")]) == 1
    assert "Cannot load points" in capsys.readouterr().err


def test_main_random(capsys):
    assert main(["--random", "30", "--grid", "8", "--seed", "1"]) == 0
    out = capsys.readouterr().out.splitlines()
    assert int(out[-1]) == len(out) - 1


def test_main_requires_one_source(input6):
    with pytest.raises(SystemExit):
        main([])
    with pytest.raises(SystemExit):
        main([str(input6), "--random", "5"])


def test_generate_points():
    points = generate_points(50, grid=10, seed=5)
    assert len(points) == len(set(points)) == 50
    assert all(0 <= p.x < 10 and 0 <= p.y < 10 for p in points)
    assert all(isinstance(p.x, int) and isinstance(p.y, int) for p in points)
    assert generate_points(50, grid=10, seed=5) == points

    with pytest.raises(ValueError):
        generate_points(101, grid=10)

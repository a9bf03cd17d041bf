import pytest

from proclab.maze.app import main
from proclab.maze.generators import GENERATORS


def _run(capsys, *args):
    code = main(list(args))
    return code, capsys.readouterr().out


def test_returns_zero_and_prints_grid(capsys):
    code, out = _run(capsys, "--size", "5", "--seed", "1")
    assert code == 0
    lines = out.strip("\n").split("\n")
    assert len(lines) == 2 * 5 + 1
    assert all(len(line) == len(lines[0]) for line in lines)


def test_border_is_closed(capsys):
    _, out = _run(capsys, "--size", "7", "--seed", "3")
    lines = out.strip("\n").split("\n")
    assert set(lines[0]) <= {"+", "-"}
    assert set(lines[-1]) <= {"+", "-"}
    for middle in lines[1::2]:
        assert middle[0] == "|"
        assert middle[-1] == "|"


def test_same_seed_is_deterministic(capsys):
    _, first = _run(capsys, "--size", "9", "--seed", "42")
    _, second = _run(capsys, "--size", "9", "--seed", "42")
    assert first == second


@pytest.mark.parametrize("name", sorted(GENERATORS))
def test_every_generator_runs(capsys, name):
    code, out = _run(capsys, "--size", "5", "--seed", "7", "--generator", name)
    assert code == 0
    assert out.startswith("+")


def test_carving_opens_interior_walls(capsys):
    _, out = _run(capsys, "--size", "5", "--seed", "2")
    lines = out.strip("\n").split("\n")
    interior = "".join(line[1:-1] for line in lines[1:-1])
    assert " " in interior.replace("  ", "")


def test_unknown_generator_rejected():
    with pytest.raises(SystemExit) as info:
        main(["--generator", "nope"])
    assert info.value.code == 2


def test_invalid_size_rejected():
    with pytest.raises(SystemExit) as info:
        main(["--size", "0"])
    assert info.value.code == 2
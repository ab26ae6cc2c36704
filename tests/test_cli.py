import re
import struct

import pytest

from tapesort.cli import main

FMT = struct.Struct("=i")
DATA = [1000, -1, 10, 42, -7, 3, 3, 0]


def write_ints(path, values):
    path.write_bytes(b"".join(FMT.pack(v) for v in values))
    return path


def read_ints(path):
    return [v for (v,) in FMT.iter_unpack(path.read_bytes())]


def reported_time(output):
    match = re.search(r"Time: (\d+)", output)
    assert match is not None
    return int(match.group(1))


@pytest.mark.parametrize("sort_type", ["1", "2"])
@pytest.mark.parametrize("memory", ["4", "8", "12", "400"])
def test_sorts_file(tmp_path, capsys, sort_type, memory):
    in_path = write_ints(tmp_path / "in", DATA)
    out_path = tmp_path / "out"
    assert main([str(in_path), str(out_path), memory, "-type", sort_type]) == 0
    assert read_ints(out_path) == sorted(DATA)
    assert read_ints(in_path) == DATA
    assert reported_time(capsys.readouterr().out) > 0


def test_zero_costs_give_zero_time(tmp_path, capsys):
    in_path = write_ints(tmp_path / "in", DATA)
    out_path = tmp_path / "out"
    code = main([str(in_path), str(out_path), "8",
                 "-rw", "0", "-move", "0", "-reset", "0"])
    assert code == 0
    assert reported_time(capsys.readouterr().out) == 0
    assert read_ints(out_path) == sorted(DATA)


def test_higher_costs_take_longer(tmp_path, capsys):
    in_path = write_ints(tmp_path / "in", DATA)
    main([str(in_path), str(tmp_path / "a"), "8"])
    cheap = reported_time(capsys.readouterr().out)
    main([str(in_path), str(tmp_path / "b"), "8", "-rw", "50"])
    costly = reported_time(capsys.readouterr().out)
    assert costly > cheap


@pytest.mark.parametrize("argv", [[], ["only_input"], ["in", "out"], ["in", "out", "8", "-rw"]])
def test_wrong_argument_count_prints_usage(capsys, argv):
    assert main(argv) == 0
    assert capsys.readouterr().out.startswith("Usage:")


def test_unknown_flag_prints_usage(tmp_path, capsys):
    in_path = write_ints(tmp_path / "in", DATA)
    out_path = tmp_path / "out"
    assert main([str(in_path), str(out_path), "8", "-speed", "3"]) == 0
    assert "Usage:" in capsys.readouterr().out
    assert not out_path.exists()


def test_memory_below_one_value_is_an_error(tmp_path, capsys):
    in_path = write_ints(tmp_path / "in", DATA)
    assert main([str(in_path), str(tmp_path / "out"), "3"]) == 1
    assert "error" in capsys.readouterr().err


def test_missing_input_is_an_error(tmp_path, capsys):
    code = main([str(tmp_path / "absent"), str(tmp_path / "out"), "8"])
    assert code == 1
    assert "error" in capsys.readouterr().err
from __future__ import annotations

import pytest

from glotaran_converter.engine.ascii_writer import DEFAULT_AUTHOR, write
from glotaran_converter.engine.errors import IoError


def test_write_emits_preamble_and_table(tmp_path):
    out = tmp_path / "trace.ascii"

    returned = write(["", "550", "551"], [["0", "1", "2"], ["5", "3", "4"]], 2, out)

    assert returned == out
    assert out.read_text() == (
        f"{out}\n"
        f"{DEFAULT_AUTHOR}\n"
        "wavelength explicit\n"
        "intervalnr 1\n"
        "\t550\t551\n"
        "0\t1\t2\n"
        "5\t3\t4\n"
    )


def test_write_appends_instead_of_truncating(tmp_path):
    out = tmp_path / "trace.ascii"

    write(["550"], [["1"]], 1, out)
    write(["600"], [["2"]], 1, out)

    lines = out.read_text().splitlines()
    assert lines.count("wavelength explicit") == 2
    assert lines[4:6] == ["550", "1"]
    assert lines[10:12] == ["600", "2"]


def test_write_quotes_cells_with_delimiters(tmp_path):
    out = tmp_path / "trace.ascii"

    write(["a\tb", 'say "hi"'], [["1", "2"]], 2, out)

    table = out.read_text().splitlines()[4:]
    assert table == ['"a\tb"\t"say ""hi"""', "1\t2"]


def test_write_uses_custom_author(tmp_path):
    out = tmp_path / "trace.ascii"

    write(["550"], [], 1, out, author="Lab 3")

    assert out.read_text().splitlines()[1] == "Lab 3"


def test_write_reports_unwritable_destination(tmp_path):
    out = tmp_path / "missing_dir" / "trace.ascii"

    with pytest.raises(IoError):
        write(["550"], [["1"]], 1, out)


def test_write_reports_unencodable_cells(tmp_path):
    out = tmp_path / "trace.ascii"

    with pytest.raises(IoError):
        write(["λ 550"], [["1"]], 1, out, encoding="ascii")

from __future__ import annotations

from glotaran_converter import main as cli


def test_cli_converts_das6_with_overrides(tmp_path, capsys):
    source = tmp_path / "decay.txt"
    source.write_text("t\tprompt\t500\na\tb\tc\n", encoding="utf-8")
    target = tmp_path / "trace.ascii"

    code = cli.main([
        "das6",
        str(source),
        "--preset",
        "das6_default",
        "--sync-delay",
        "0",
        "--ns-per-chn",
        "2",
        "--output",
        str(target),
        "--author",
        "Lab 3",
    ])

    assert code == 0
    assert capsys.readouterr().out.strip() == str(target)
    assert target.read_text().splitlines() == [
        str(target),
        "Lab 3",
        "wavelength explicit",
        "intervalnr 3",
        "0\t0\t500\t",
        "0\ta\tc",
    ]


def test_cli_reports_parse_failures(tmp_path):
    code = cli.main(["lfp", str(tmp_path / "absent.csv")])

    assert code == 1


def test_cli_reports_invalid_recipe(tmp_path):
    source = tmp_path / "decay.txt"
    source.write_text("t\tprompt\t500\n", encoding="utf-8")

    assert cli.main(["das6", str(source)]) == 1


def test_cli_preset_file_path(tmp_path):
    preset = tmp_path / "lab.yaml"
    preset.write_text("module: das6\nparams:\n  sync_delay: 1\n  ns_per_chn: 1\n", encoding="utf-8")
    source = tmp_path / "decay.txt"
    source.write_text("t\tprompt\t500\na\tb\tc\n", encoding="utf-8")

    assert cli.main(["das6", str(source), "--preset", str(preset)]) == 0
    assert (tmp_path / "decay.ascii").read_text().splitlines()[-1] == "-1\ta\tc"

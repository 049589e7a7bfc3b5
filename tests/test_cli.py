import argparse
import json
import sys

import pytest

from huelab import __version__
from huelab.main import main
from huelab.shared.sanitizer import INPUT_HANDLERS


def run_cli(monkeypatch, *argv):
    monkeypatch.setattr(sys, "argv", ["huelab", *argv])
    with pytest.raises(SystemExit) as exc:
        main()
    return exc.value.code


def test_convert(monkeypatch, capsys):
    assert run_cli(monkeypatch, "convert", "#ff0000", "-t", "hex", "rgb") == 0
    out = capsys.readouterr().out
    assert "#ff0000" in out
    assert "rgb(255, 0, 0)" in out


def test_convert_json(monkeypatch, capsys):
    assert run_cli(monkeypatch, "convert", "rgba(51, 102, 153, 0.8)", "--json") == 0
    data = json.loads(capsys.readouterr().out)
    assert data["hex"] == "#336699cc"
    assert data["raw_values"]["rgba"]["a"] == 0.8


def test_convert_range_error_exits_2(monkeypatch, capsys):
    assert run_cli(monkeypatch, "convert", "rgb(256, 0, 0)") == 2
    err = capsys.readouterr().err
    assert "[error]" in err
    assert "red value 256" in err


def test_convert_unrecognized_exits_2(monkeypatch, capsys):
    assert run_cli(monkeypatch, "convert", "nope") == 2
    assert "unrecognized color" in capsys.readouterr().err


def test_scheme_json(monkeypatch, capsys):
    assert run_cli(monkeypatch, "scheme", "#ff0000", "-t", "triadic", "--json") == 0
    data = json.loads(capsys.readouterr().out)
    assert data["triadic"]["colors"] == ["#ff0000", "#00ff00", "#0000ff"]


def test_scheme_rejects_unknown_type(monkeypatch, capsys):
    assert run_cli(monkeypatch, "scheme", "#ff0000", "-t", "pentadic") == 2
    assert "invalid choice" in capsys.readouterr().err


def test_contrast(monkeypatch, capsys):
    assert run_cli(monkeypatch, "contrast", "#000000", "#ffffff") == 0
    assert "21.00:1" in capsys.readouterr().out


def test_contrast_fix_json(monkeypatch, capsys):
    assert run_cli(monkeypatch, "contrast", "#999999", "#ffffff", "--fix", "--pairs", "2", "--json") == 0
    data = json.loads(capsys.readouterr().out)
    assert data["accessible"]["contrast"] >= 4.5
    assert len(data["pairs"]) == 2


def test_vision_json(monkeypatch, capsys):
    assert run_cli(monkeypatch, "vision", "#ff0000", "-t", "achromatopsia", "--json") == 0
    hex_code = json.loads(capsys.readouterr().out)["simulated"]["achromatopsia"]["hex"]
    assert hex_code[1:3] == hex_code[3:5] == hex_code[5:7]


def test_mix(monkeypatch, capsys):
    assert run_cli(monkeypatch, "mix", "#000000", "#808080", "-m", "screen") == 0
    assert "#808080" in capsys.readouterr().out


def test_version(monkeypatch, capsys):
    assert run_cli(monkeypatch, "--version") == 0
    assert __version__ in capsys.readouterr().out


def test_list_color_names(monkeypatch, capsys):
    assert run_cli(monkeypatch, "--list-color-names", "json") == 0
    names = json.loads(capsys.readouterr().out)
    assert "rebeccapurple" in names
    assert names == sorted(names)


def test_unknown_command(monkeypatch, capsys):
    assert run_cli(monkeypatch, "paint") == 2
    assert "unrecognized command" in capsys.readouterr().err


def test_input_handlers_clamp_and_normalize():
    assert INPUT_HANDLERS["float_0_1"]("1.7") == 1.0
    assert INPUT_HANDLERS["intensity"]("250") == 100
    assert INPUT_HANDLERS["harmony_type"]("Split Complementary") == "split-complementary"
    assert INPUT_HANDLERS["format"](" HSL ") == "hsl"
    with pytest.raises(argparse.ArgumentTypeError):
        INPUT_HANDLERS["float_0_1"]("abc")
    with pytest.raises(argparse.ArgumentTypeError):
        INPUT_HANDLERS["blend_mode"]("dodge")


def test_json_error_payload(monkeypatch, capsys):
    assert run_cli(monkeypatch, "convert", "rgb(256, 0, 0)", "--json") == 2
    error = json.loads(capsys.readouterr().out)["error"]
    assert error["code"] == "OUT_OF_RANGE_VALUE"
    assert error["context"]["field"] == "red"
    assert error["context"]["range"] == [0, 255]

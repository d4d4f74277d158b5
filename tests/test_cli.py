from PIL import Image

from bannerpic.cli import _build_parser, main


def test_image_command(tmp_path, capsys):
    path = tmp_path / "black.png"
    Image.new("RGB", (20, 10), (0, 0, 0)).save(path)
    assert main(["image", str(path), "-w", "10", "-c", "1", "-r", "simple"]) == 0
    assert capsys.readouterr().out == "##########\n##########\n"


def test_image_command_with_slogan_to_file(tmp_path):
    path = tmp_path / "white.png"
    out = tmp_path / "banner.txt"
    Image.new("RGB", (20, 10), (255, 255, 255)).save(path)
    assert main(["image", str(path), "-w", "10", "-r", "#.", "-i", "-s", "go", "-o", str(out)]) == 0
    assert out.read_text(encoding="utf-8") == "##########\n##########\n    go\n"


def test_missing_image_reports_error(tmp_path, capsys):
    assert main(["image", str(tmp_path / "missing.png")]) == 1
    assert capsys.readouterr().err.startswith("error: ")


def test_bad_option_reports_error(tmp_path, capsys):
    path = tmp_path / "img.png"
    Image.new("RGB", (4, 4)).save(path)
    assert main(["image", str(path), "-r", "#"]) == 1
    assert "at least 2" in capsys.readouterr().err


def test_text_command(capsys):
    assert main(["text", "Hi", "-f", "Standard"]) == 0
    out = capsys.readouterr().out
    assert len(out.splitlines()) > 1


def test_unknown_font_reports_error(capsys):
    assert main(["text", "Hi", "-f", "no_such_font_anywhere"]) == 1
    assert "Unknown font" in capsys.readouterr().err


def test_listings(capsys):
    assert main(["ramps"]) == 0
    assert main(["fonts"]) == 0
    out = capsys.readouterr().out
    assert "standard" in out
    assert "ANSI Shadow" in out


def test_verbose_after_subcommand(tmp_path, capsys):
    path = tmp_path / "black.png"
    Image.new("RGB", (20, 10), (0, 0, 0)).save(path)
    assert main(["image", str(path), "-w", "10", "-c", "1", "-r", "simple", "-v"]) == 0
    assert capsys.readouterr().out == "##########\n##########\n"
    assert main(["text", "Hi", "--verbose"]) == 0


def test_verbose_flag_positions():
    parser = _build_parser()
    assert parser.parse_args(["image", "a.png", "-v"]).verbose is True
    assert parser.parse_args(["-v", "image", "a.png"]).verbose is True
    assert parser.parse_args(["image", "a.png"]).verbose is False
    assert parser.parse_args(["-v", "ramps"]).verbose is True

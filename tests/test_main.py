"""Tests for the command line interface."""

from pathlib import Path

import pytest
from PIL import Image

from curvelut.__main__ import main, parse_args


@pytest.fixture
def input_image(tmp_path: Path) -> str:
    path = tmp_path / "input.png"
    Image.new("RGB", (4, 4), (10, 20, 30)).save(path)
    return str(path)


class TestParseArgs:
    """Test argument parsing."""

    def test_defaults(self) -> None:
        args = parse_args(["in.png", "out.png"])
        assert args.preset == "none"
        assert args.curves is None
        assert args.master is None
        assert args.planes is None
        assert args.loglevel == "WARNING"

    def test_repeated_curves(self) -> None:
        args = parse_args(["in.png", "out.png", "--curve", "0/0 1/1", "--curve", ""])
        assert args.curves == ["0/0 1/1", ""]

    def test_acv_and_psd_exclusive(self) -> None:
        with pytest.raises(SystemExit):
            parse_args(["in.png", "out.png", "--acv", "a.acv", "--psd", "b.psd"])


class TestMain:
    """Test running the command line."""

    def test_preset(self, tmp_path: Path, input_image: str) -> None:
        output = tmp_path / "output.png"
        assert main([input_image, str(output), "--preset", "negative"]) == 0
        with Image.open(output) as image:
            assert image.getpixel((0, 0)) == (245, 235, 225)

    def test_curves_and_planes(self, tmp_path: Path, input_image: str) -> None:
        output = tmp_path / "output.png"
        argv = [input_image, str(output), "--master", "0/1 1/0", "--planes", "2"]
        assert main(argv) == 0
        with Image.open(output) as image:
            assert image.getpixel((0, 0)) == (10, 20, 225)

    def test_acv(self, tmp_path: Path, input_image: str, master_acv: bytes) -> None:
        acv = tmp_path / "curve.acv"
        acv.write_bytes(master_acv)
        output = tmp_path / "output.png"
        assert main([input_image, str(output), "--acv", str(acv)]) == 0
        assert output.exists()

    def test_svg(self, tmp_path: Path, input_image: str) -> None:
        svg = tmp_path / "filter.svg"
        argv = [input_image, str(tmp_path / "out.png"), "--preset", "8", "--svg", str(svg)]
        assert main(argv) == 0
        assert "feComponentTransfer" in svg.read_text(encoding="utf-8")

    def test_curve_error(
        self, tmp_path: Path, input_image: str, capsys: pytest.CaptureFixture
    ) -> None:
        output = tmp_path / "output.png"
        assert main([input_image, str(output), "--curve", "0.5/0.5"]) == 1
        assert "Curve: only one point is defined" in capsys.readouterr().err
        assert not output.exists()

    def test_unwritable_output(
        self, tmp_path: Path, input_image: str, capsys: pytest.CaptureFixture
    ) -> None:
        output = tmp_path / "missing" / "output.png"
        assert main([input_image, str(output), "--preset", "negative"]) == 1
        assert str(output) in capsys.readouterr().err

    def test_unwritable_svg(
        self, tmp_path: Path, input_image: str, capsys: pytest.CaptureFixture
    ) -> None:
        svg = tmp_path / "missing" / "filter.svg"
        argv = [input_image, str(tmp_path / "out.png"), "--svg", str(svg)]
        assert main(argv) == 1
        assert str(svg) in capsys.readouterr().err

    def test_missing_input(
        self, tmp_path: Path, capsys: pytest.CaptureFixture
    ) -> None:
        argv = [str(tmp_path / "nothing.png"), str(tmp_path / "out.png")]
        assert main(argv) == 1
        assert "nothing.png" in capsys.readouterr().err

"""Tests for curves read from PSD Curves adjustment layers."""

from pathlib import Path
from types import SimpleNamespace
from typing import Any
from unittest.mock import MagicMock, patch

import pytest
from psd_tools.api import adjustments

from curvelut import Curves, Source
from curvelut.errors import InvalidFormat, IOFailure
from curvelut.keypoints import BLUE, MASTER, RED
from curvelut.psd import find_curves_layer, keypoints_from_layer, load_curves_layer


def make_layer(*items: tuple[int, list[tuple[int, int]]]) -> Any:
    extra = [SimpleNamespace(channel_id=c, points=points) for c, points in items]
    return SimpleNamespace(name="Curves 1", data=SimpleNamespace(extra=extra))


class TestKeypointsFromLayer:
    """Test conversion of Curves layer data."""

    def test_channels(self) -> None:
        layer = make_layer(
            (0, [(0, 0), (255, 255)]),
            (1, [(0, 0), (160, 95), (255, 255)]),
            (3, [(255, 0), (0, 255)]),
        )
        curves = keypoints_from_layer(layer)
        assert curves[MASTER] == [(0.0, 0.0), (1.0, 1.0)]
        assert curves[RED] == [(0.0, 0.0), (95 / 255, 160 / 255), (1.0, 1.0)]
        assert curves[BLUE] == [(0.0, 1.0), (1.0, 0.0)]

    def test_unknown_channel(self, caplog: pytest.LogCaptureFixture) -> None:
        layer = make_layer((0, [(0, 0), (255, 255)]), (7, [(0, 0), (255, 255)]))
        assert list(keypoints_from_layer(layer)) == [MASTER]
        assert "Unknown channel ID 7" in caplog.text

    def test_no_curve_data(self) -> None:
        layer = SimpleNamespace(name="Empty", data=SimpleNamespace(extra=[]))
        assert keypoints_from_layer(layer) == {}  # type: ignore[arg-type]


class TestFindCurvesLayer:
    """Test locating the Curves adjustment layer."""

    def test_first_curves_layer(self) -> None:
        first = MagicMock(spec=adjustments.Curves)
        second = MagicMock(spec=adjustments.Curves)
        psd = MagicMock()
        psd.descendants.return_value = [object(), first, second]
        assert find_curves_layer(psd) is first

    def test_no_curves_layer(self) -> None:
        psd = MagicMock()
        psd.descendants.return_value = [object()]
        assert find_curves_layer(psd) is None

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(IOFailure, match="unable to read PSD file"):
            load_curves_layer(str(tmp_path / "missing.psd"))

    def test_document_without_curves(self) -> None:
        psd = MagicMock()
        psd.descendants.return_value = []
        with patch("curvelut.psd.PSDImage.open", return_value=psd):
            with pytest.raises(InvalidFormat, match="no Curves adjustment layer"):
                load_curves_layer("document.psd")


class TestPSDCurves:
    """Test PSD curves through the filter."""

    def test_file_source(self) -> None:
        layer = make_layer((0, [(255, 0), (0, 255)]))
        with patch(
            "curvelut.curves.load_curves_layer",
            return_value=keypoints_from_layer(layer),
        ):
            curves = Curves(psd="document.psd")
        assert curves.sources[MASTER] is Source.FILE
        assert curves.luts[RED].tolist() == [255 - i for i in range(256)]

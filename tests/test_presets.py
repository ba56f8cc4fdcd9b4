"""Tests for built-in presets."""

import numpy as np
import pytest

from curvelut import Curves, SampleFormat, Source
from curvelut.errors import MalformedInput
from curvelut.keypoints import BLUE, GREEN, MASTER, RED
from curvelut.presets import PRESETS, Preset, get_preset, preset_curves


class TestGetPreset:
    """Test preset lookup by id and name."""

    def test_by_id(self) -> None:
        assert get_preset(8) is Preset.NEGATIVE
        assert get_preset("10") is Preset.VINTAGE
        assert get_preset(Preset.DARKER) is Preset.DARKER

    def test_by_name(self) -> None:
        assert get_preset("vintage") is Preset.VINTAGE
        assert get_preset("cross-process") is Preset.CROSS_PROCESS
        assert get_preset("Strong_Contrast") is Preset.STRONG_CONTRAST

    @pytest.mark.parametrize("preset", [-1, 11, "sepia"])
    def test_invalid(self, preset: object) -> None:
        with pytest.raises(MalformedInput):
            get_preset(preset)  # type: ignore[arg-type]

    @pytest.mark.parametrize("preset", [None, 1.7, True, b"8"])
    def test_invalid_type(self, preset: object) -> None:
        with pytest.raises(MalformedInput, match="preset must be an id or a name"):
            get_preset(preset)  # type: ignore[arg-type]

    def test_numpy_integer(self) -> None:
        assert get_preset(np.int64(4)) is Preset.INCREASE_CONTRAST


class TestPresetTable:
    """Test the preset point tables."""

    def test_all_ids_present(self) -> None:
        assert sorted(PRESETS) == list(range(11))

    @pytest.mark.parametrize(
        "preset", [Preset.COLOR_NEGATIVE, Preset.CROSS_PROCESS, Preset.VINTAGE]
    )
    def test_color_presets(self, preset: Preset) -> None:
        assert sorted(preset_curves(preset)) == [RED, GREEN, BLUE]

    @pytest.mark.parametrize("preset", range(3, 10))
    def test_tone_presets(self, preset: int) -> None:
        assert sorted(preset_curves(preset)) == [MASTER]

    def test_verbatim_points(self) -> None:
        assert PRESETS[Preset.NEGATIVE][MASTER] == "0/1 1/0"
        assert PRESETS[Preset.VINTAGE][RED] == "0/0.11 0.42/0.51 1/0.95"
        assert (
            PRESETS[Preset.CROSS_PROCESS][GREEN]
            == "0/0 0.25/0.188 0.38/0.501 0.745/0.815 1/0.815"
        )
        assert (
            PRESETS[Preset.INCREASE_CONTRAST][MASTER]
            == "0/0 0.149/0.066 0.831/0.905 0.905/0.98 1/1"
        )

    @pytest.mark.parametrize("bits", [8, 16])
    @pytest.mark.parametrize("preset", list(Preset))
    def test_every_preset_builds(self, preset: Preset, bits: int) -> None:
        curves = Curves(SampleFormat(bits_per_sample=bits), preset=preset)
        assert all(len(lut) == 1 << bits for lut in curves.luts)


class TestPresetCurves:
    """Test presets through the filter."""

    def test_negative(self) -> None:
        curves = Curves(preset=8)
        inverted = [255 - i for i in range(256)]
        assert curves.luts[MASTER].tolist() == inverted
        assert curves.luts[RED].tolist() == inverted
        assert curves.sources[MASTER] is Source.PRESET

    def test_explicit_curve_beats_preset(self) -> None:
        curves = Curves(preset=1, curves=[None, "0/0 1/1"])
        assert curves.sources[RED] is Source.PRESET
        assert curves.sources[GREEN] is Source.EXPLICIT
        assert curves.luts[GREEN].tolist() == list(range(256))

    def test_empty_curve_falls_back_to_preset(self) -> None:
        curves = Curves(preset="vintage", curves=["", []])
        assert curves.sources[RED] is Source.PRESET
        assert curves.sources[GREEN] is Source.PRESET

    def test_explicit_master_beats_preset(self) -> None:
        curves = Curves(preset=Preset.NEGATIVE, master="0/0 1/1")
        assert curves.sources[MASTER] is Source.EXPLICIT
        assert np.array_equal(curves.luts[MASTER], np.arange(256))

    def test_color_preset_keeps_master_identity(self) -> None:
        curves = Curves(preset=Preset.CROSS_PROCESS)
        assert curves.sources[MASTER] is Source.IDENTITY
        assert curves.luts[MASTER].tolist() == list(range(256))

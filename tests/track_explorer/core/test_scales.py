import math

import pytest

from track_explorer.core.dimensions import Dimension, DimensionRegistry, ScaleType
from track_explorer.core.records import TrackRecord
from track_explorer.core.scales import (
    LOG_FLOOR,
    LinearScale,
    LogScale,
    OrdinalScale,
    build_scale,
    build_scales,
    position_of,
)

HEIGHT = 100.0


def _records(name, values):
    return [
        TrackRecord(f"t{i}", "a", "pop", 80.0, 80.0, features={name: float(v)})
        for i, v in enumerate(values)
    ]


def test_linear_scale_maps_domain_to_inverted_pixel_range():
    dim = Dimension("energy", "Energy")
    scale = build_scale(dim, _records("energy", [0, 5, 10]), HEIGHT)

    assert isinstance(scale, LinearScale)
    assert scale.domain == (0.0, 10.0)
    assert scale.forward(0) == 100.0
    assert scale.forward(10) == 0.0
    assert scale.forward(5) == 50.0
    assert scale.invert(25) == pytest.approx(7.5)


def test_linear_scale_extrapolates_and_skips_nan_in_domain():
    dim = Dimension("energy", "Energy")
    scale = build_scale(dim, _records("energy", [0, float("nan"), 10]), HEIGHT)

    assert scale.domain == (0.0, 10.0)
    assert scale.forward(20) == -100.0
    assert math.isnan(scale.forward(float("nan")))


def test_linear_scale_with_single_value_sits_mid_axis():
    dim = Dimension("energy", "Energy")
    scale = build_scale(dim, _records("energy", [3, 3]), HEIGHT)

    assert scale.forward(3) == 50.0


def test_log_scale_floor_substitutes_zero_and_nan():
    dim = Dimension("instrumentalness", "Instr", ScaleType.LOG)
    scale = build_scale(dim, _records("instrumentalness", [0, 0.001, 0.1]), HEIGHT)

    assert isinstance(scale, LogScale)
    assert scale.domain == (LOG_FLOOR, 0.1)
    assert not scale.clamp
    assert scale.forward(0) == 100.0
    assert scale.forward(-3) == 100.0
    assert scale.forward(float("nan")) == 100.0
    assert scale.forward(0.1) == pytest.approx(0.0)
    assert scale.invert(100) == pytest.approx(LOG_FLOOR)
    assert scale.invert(0) == pytest.approx(0.1)


def test_log_scale_floor_follows_observed_minimum():
    dim = Dimension("instrumentalness", "Instr", ScaleType.LOG)
    scale = build_scale(dim, _records("instrumentalness", [0.01, 0.1, 1.0]), HEIGHT)

    assert scale.domain == (0.01, 1.0)
    assert scale.forward(0.1) == pytest.approx(50.0)


def test_capped_log_scale_clamps_to_cap():
    dim = Dimension("instrumentalness", "Instr", ScaleType.LOG, cap=0.9)
    scale = build_scale(dim, _records("instrumentalness", [0.001, 0.5, 0.95]), HEIGHT)

    assert scale.domain == (0.001, 0.9)
    assert scale.clamp
    assert scale.forward(0.95) == 0.0
    assert scale.forward(0.9) == pytest.approx(0.0)
    assert scale.invert(-50) == pytest.approx(0.9)
    assert scale.invert(150) == pytest.approx(0.001)


def test_ordinal_scale_with_explicit_values():
    dim = Dimension("time_signature", "TS", ScaleType.ORDINAL, values=(3.0, 4.0, 5.0))
    scale = build_scale(dim, _records("time_signature", [4, 4, 3]), HEIGHT)

    assert isinstance(scale, OrdinalScale)
    assert not scale.invertible
    assert scale.forward(3) == 100.0
    assert scale.forward(4) == 50.0
    assert scale.forward(5) == 0.0
    assert math.isnan(scale.forward(6))
    assert math.isnan(scale.forward(float("nan")))
    with pytest.raises(TypeError):
        scale.invert(50)


def test_ordinal_scale_infers_sorted_values():
    dim = Dimension("mode", "Mode", ScaleType.ORDINAL)
    scale = build_scale(dim, _records("mode", [1, 0, 1, float("nan")]), HEIGHT)

    assert scale.values == (0.0, 1.0)
    assert scale.forward(0) == 100.0
    assert scale.forward(1) == 0.0
    assert [text for _, text in scale.ticks()] == ["0", "1"]


def test_ordinal_scale_single_value_sits_mid_axis():
    scale = OrdinalScale([4], HEIGHT)
    assert scale.forward(4) == 50.0


def test_failed_scale_falls_back_to_unit_linear():
    linear = build_scale(Dimension("energy", "Energy"), _records("energy", ["nan", "nan"]), HEIGHT)
    capped = build_scale(
        Dimension("instrumentalness", "Instr", ScaleType.LOG, cap=0.9),
        _records("instrumentalness", ["nan"]),
        HEIGHT,
    )

    for scale in (linear, capped):
        assert isinstance(scale, LinearScale)
        assert scale.domain == (0.0, 1.0)


def test_build_scales_covers_every_dimension():
    registry = DimensionRegistry([Dimension("energy", "Energy"), Dimension("valence", "Valence")])
    records = [
        TrackRecord("t", "a", "pop", 80.0, 80.0, features={"energy": 0.1, "valence": 0.2}),
        TrackRecord("u", "a", "pop", 80.0, 80.0, features={"energy": 0.9, "valence": 0.4}),
    ]

    scales = build_scales(registry, records, HEIGHT)

    assert set(scales) == {"energy", "valence"}
    assert scales["valence"].domain == (0.2, 0.4)


def test_position_of_never_raises():
    scale = LinearScale((0.0, 1.0), HEIGHT)
    assert math.isnan(position_of(scale, None))
    assert position_of(scale, 0.5) == 50.0

from types import SimpleNamespace

from track_explorer.core.dataset import TrackDataset
from track_explorer.core.dimensions import Dimension, DimensionRegistry, ScaleType
from track_explorer.core.filter_state import ScalarFilters
from track_explorer.core.records import TrackRecord
from track_explorer.ui.helpers import active_axes_text, parse_constraint_restyle, session_from_stores

HEIGHT = 100.0
FIVE = frozenset({"Spotify", "Apple", "Tidal", "Deezer", "YouTube"})


def _make_registry():
    return DimensionRegistry(
        [
            Dimension("energy", "Energy"),
            Dimension("instrumentalness", "Instr", ScaleType.LOG, cap=0.9),
            Dimension("time_signature", "Time Signature", ScaleType.ORDINAL, values=(3.0, 4.0, 5.0)),
        ]
    )


def _make_ctx(defaults=None):
    records = [
        TrackRecord(
            name, "artist", "pop", pop, pop,
            features={"energy": e, "instrumentalness": 0.1, "time_signature": 4.0},
            platform_hits=FIVE,
        )
        for name, pop, e in [("a", 80.0, 0.2), ("b", 90.0, 0.8), ("c", 86.0, 0.5)]
    ]
    ds = TrackDataset("tracks", records, registry=_make_registry(), axis_height=HEIGHT)
    return SimpleNamespace(dataset=ds, global_config=SimpleNamespace(defaults=defaults or ScalarFilters()))


def test_constraint_range_becomes_pixel_selection():
    restyle = [{"dimensions[0].constraintrange": [[10, 30]]}, [0]]

    assert parse_constraint_restyle(restyle, _make_registry(), HEIGHT) == {"energy": (70.0, 90.0)}


def test_cleared_constraint_range_maps_to_none():
    registry = _make_registry()

    assert parse_constraint_restyle(
        [{"dimensions[2].constraintrange": None}, [0]], registry, HEIGHT
    ) == {"time_signature": None}
    assert parse_constraint_restyle(
        [{"dimensions[1].constraintrange": [None]}, [0]], registry, HEIGHT
    ) == {"instrumentalness": None}


def test_multiselect_payload_keeps_first_range():
    restyle = [{"dimensions[0].constraintrange": [[[10, 30], [50, 60]]]}, [0]]
    assert parse_constraint_restyle(restyle, _make_registry(), HEIGHT) == {"energy": (70.0, 90.0)}


def test_unrelated_restyle_keys_are_ignored():
    registry = _make_registry()

    assert parse_constraint_restyle(None, registry, HEIGHT) == {}
    assert parse_constraint_restyle([{"line.color": ["red"]}, [0]], registry, HEIGHT) == {}
    assert parse_constraint_restyle([{"dimensions[9].constraintrange": [[1, 2]]}, [0]], registry, HEIGHT) == {}


def test_session_from_stores_restores_filters_and_brushes():
    ctx = _make_ctx()

    session = session_from_stores(ctx, {"min_popularity": 85}, {"energy": [90, 10]})

    assert session.filters.min_popularity == 85
    assert session.filters.min_platforms == 5
    assert session.actives == ("energy",)
    assert [r.track_name for r in session.visible_records()] == ["c"]


def test_session_from_empty_stores_uses_configured_defaults():
    ctx = _make_ctx(defaults=ScalarFilters(min_popularity=88))

    session = session_from_stores(ctx, None, None)

    assert session.filters.min_popularity == 88
    assert session.actives == ()
    assert session.visible_count == 1


def test_active_axes_text_lists_labels_in_order():
    registry = _make_registry()

    assert active_axes_text((), registry).startswith("Drag along an axis")
    assert active_axes_text(("energy", "time_signature"), registry) == "Filtering on: Energy, Time Signature"

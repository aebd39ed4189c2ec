import pytest

from track_explorer.core.dataset import TrackDataset
from track_explorer.core.dimensions import Dimension, DimensionRegistry, ScaleType
from track_explorer.core.filter_state import ALL_GENRES, ScalarFilters
from track_explorer.core.records import TrackRecord
from track_explorer.core.session import RECOMPUTE_TRIGGERS, ExplorerSession

HEIGHT = 100.0
FIVE = frozenset({"Spotify", "Apple", "Tidal", "Deezer", "YouTube"})


def _make_dataset():
    registry = DimensionRegistry(
        [
            Dimension("energy", "Energy"),
            Dimension("instrumentalness", "Instr", ScaleType.LOG, cap=0.9),
            Dimension("time_signature", "TS", ScaleType.ORDINAL, values=(3.0, 4.0, 5.0)),
        ]
    )
    rows = [
        ("quiet", 80, "pop", 0.2, 0.0, 4.0, FIVE),
        ("unpopular", 70, "pop", 0.5, 0.01, 4.0, FIVE),
        ("loud", 90, "rock", 0.8, 0.5, 3.0, FIVE),
        ("capital", 75, "Pop", 0.4, 0.01, 4.0, FIVE),
        ("few-platforms", 85, "pop", 0.5, 0.01, 4.0, frozenset({"Spotify", "Apple"})),
        ("missing-instr", 88, "pop", 0.5, float("nan"), 4.0, FIVE),
    ]
    records = [
        TrackRecord(
            name, "artist", genre, float(pop), float(pop),
            features={"energy": e, "instrumentalness": i, "time_signature": ts},
            platform_hits=hits,
        )
        for name, pop, genre, e, i, ts, hits in rows
    ]
    return TrackDataset("tracks", records, registry=registry, axis_height=HEIGHT)


def test_new_session_uses_default_filters():
    session = ExplorerSession(_make_dataset())

    assert session.filters == ScalarFilters(72, 5, ALL_GENRES)
    assert session.actives == ()
    assert session.visible_count == 4
    assert [r.track_name for r in session.visible_records()] == [
        "quiet", "loud", "capital", "missing-instr",
    ]


def test_popularity_and_genre_controls_recompute():
    session = ExplorerSession(_make_dataset())

    session.set_popularity_threshold(85)
    assert session.visible_count == 2
    assert session.last_trigger == "popularity"

    outcome = session.set_genre("rock")
    assert outcome.visible_count == 1

    session.set_genre(None)
    assert session.filters.selected_genre == ALL_GENRES
    assert session.visible_count == 2


def test_min_platforms_falls_back_when_nothing_qualifies():
    session = ExplorerSession(_make_dataset())

    assert session.set_min_platforms(7) is False
    assert session.filters.min_platforms == 5
    assert session.visible_count == 4

    assert session.set_min_platforms(2) is True
    assert session.filters.min_platforms == 2
    assert session.visible_count == 5


def test_set_brush_on_unknown_dimension_raises():
    session = ExplorerSession(_make_dataset())
    with pytest.raises(KeyError):
        session.set_brush("bpm", [10, 20])


def test_clearing_one_brush_keeps_the_other():
    ds = _make_dataset()
    session = ExplorerSession(ds)

    session.set_brush("energy", [90, 10])
    session.set_brush("time_signature", [40, 60])
    energy_extent = session.outcome.extents["energy"]
    assert session.actives == ("energy", "time_signature")

    session.clear_brush("time_signature")

    assert session.actives == ("energy",)
    assert session.outcome.extents["energy"] == energy_extent

    only_energy = ExplorerSession(ds)
    only_energy.set_brush("energy", [90, 10])
    assert session.visible_count == only_energy.visible_count


def test_zero_width_brush_is_not_active():
    session = ExplorerSession(_make_dataset())
    session.set_brush("energy", [30, 30])
    assert session.actives == ()


def test_clear_all_brushes_keeps_scalar_filters():
    session = ExplorerSession(_make_dataset())
    session.set_popularity_threshold(85)
    session.set_brush("energy", [90, 10])

    session.clear_all_brushes()

    assert session.actives == ()
    assert session.filters.min_popularity == 85


def test_reset_restores_defaults_and_drops_brushes():
    ds = _make_dataset()
    session = ExplorerSession(ds)
    session.set_popularity_threshold(50)
    session.set_min_platforms(2)
    session.set_genre("pop")
    session.set_brush("energy", [90, 10])

    outcome = session.reset()

    assert session.filters == ScalarFilters(72, 5, ALL_GENRES)
    assert outcome.actives == ()
    assert len(session.brushes) == 0
    assert outcome.visible_count == ExplorerSession(ds).visible_count


def test_recompute_is_repeatable():
    session = ExplorerSession(_make_dataset())
    session.set_brush("instrumentalness", [100, 50])

    first = session.recompute()
    second = session.recompute()

    assert first == second


def test_every_control_is_a_recompute_trigger():
    assert set(RECOMPUTE_TRIGGERS) == {
        "brush", "clear_brush", "clear_all_brushes", "popularity", "platforms", "genre", "reset",
    }


def test_session_does_not_mutate_the_filters_it_was_given():
    given = ScalarFilters(min_popularity=60, min_platforms=2, selected_genre="pop")
    session = ExplorerSession(_make_dataset(), filters=given)

    session.set_popularity_threshold(85)
    session.set_min_platforms(7)
    session.set_genre("rock")

    assert given == ScalarFilters(60, 2, "pop")
    assert session.filters is not given

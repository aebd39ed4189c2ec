import pytest

from track_explorer.core.brush_state import BrushStore


def test_set_keeps_drag_order_and_marks_active():
    store = BrushStore()
    store.set("energy", [90, 10])

    assert store.actives() == ["energy"]
    assert store.selection("energy") == (90.0, 10.0)
    assert "energy" in store


def test_zero_width_or_none_selection_removes_brush():
    store = BrushStore({"energy": [10, 20], "valence": [5, 50]})

    store.set("energy", [15, 15])
    store.set("valence", None)

    assert len(store) == 0
    assert store.selection("energy") is None


def test_clearing_one_brush_leaves_others_untouched():
    store = BrushStore({"energy": [10, 20], "valence": [5, 50]})

    store.clear("energy")

    assert store.actives() == ["valence"]
    assert store.selection("valence") == (5.0, 50.0)


def test_clear_all_empties_store():
    store = BrushStore({"energy": [10, 20], "valence": [5, 50]})
    store.clear_all()
    assert store.actives() == []


def test_dict_roundtrip_for_dcc_store():
    store = BrushStore({"energy": [10, 20]})

    raw = store.to_dict()
    rebuilt = BrushStore.from_dict(raw)

    assert raw == {"energy": [10.0, 20.0]}
    assert rebuilt == store
    assert BrushStore.from_dict(None) == BrushStore()


def test_selection_needs_two_positions():
    with pytest.raises(ValueError):
        BrushStore().set("energy", [1, 2, 3])

import json
from pathlib import Path

import pytest

from track_explorer.config import load_global_config
from track_explorer.core.exceptions import ConfigError
from track_explorer.core.filter_state import ALL_GENRES


def _write_global(root: Path, payload) -> Path:
    root.mkdir(parents=True, exist_ok=True)
    path = root / "global.json"
    path.write_text(payload if isinstance(payload, str) else json.dumps(payload))
    return path


def test_minimal_config_uses_defaults(tmp_path):
    _write_global(tmp_path, {"data_file": "tracks.csv"})

    cfg = load_global_config(tmp_path)

    assert cfg.data_file == (tmp_path / "tracks.csv").resolve()
    assert cfg.defaults.min_popularity == 72
    assert cfg.defaults.min_platforms == 5
    assert cfg.defaults.selected_genre == ALL_GENRES
    assert cfg.platform_choices == [1, 2, 3, 4, 5, 6, 7]
    assert cfg.popularity_range == (0.0, 100.0)
    assert cfg.dimensions is None
    assert len(cfg.dimension_registry()) == 18


def test_full_config_is_parsed(tmp_path):
    data_file = tmp_path / "elsewhere" / "tracks.csv"
    _write_global(
        tmp_path,
        {
            "data_file": str(data_file),
            "ui_title": "Hits",
            "axis_height": 300,
            "defaults": {"min_popularity": 60, "min_platforms": 3, "selected_genre": "rock"},
            "platform_choices": [1, 2, 3],
            "popularity_range": [50, 100],
            "dimensions": [
                {"name": "energy", "label": "Energy"},
                {"name": "instrumentalness", "type": "log", "cap": 0.9},
            ],
        },
    )

    cfg = load_global_config(tmp_path)

    assert cfg.data_file == data_file
    assert cfg.ui_title == "Hits"
    assert cfg.axis_height == 300.0
    assert cfg.defaults.min_platforms == 3
    assert cfg.defaults.selected_genre == "rock"
    assert cfg.popularity_range == (50.0, 100.0)
    assert cfg.dimension_registry().names == ["energy", "instrumentalness"]


def test_missing_global_json_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_global_config(tmp_path)


def test_invalid_json_raises_config_error(tmp_path):
    _write_global(tmp_path, "{not json")
    with pytest.raises(ConfigError):
        load_global_config(tmp_path)


def test_missing_data_file_raises_config_error(tmp_path):
    _write_global(tmp_path, {"ui_title": "x"})
    with pytest.raises(ConfigError):
        load_global_config(tmp_path)


@pytest.mark.parametrize("bad_range", [[100, 0], [1, 2, 3]])
def test_bad_popularity_range_raises_config_error(tmp_path, bad_range):
    _write_global(tmp_path, {"data_file": "t.csv", "popularity_range": bad_range})
    with pytest.raises(ConfigError):
        load_global_config(tmp_path)


def test_dimensions_must_be_a_list(tmp_path):
    _write_global(tmp_path, {"data_file": "t.csv", "dimensions": {"name": "energy"}})
    with pytest.raises(ConfigError):
        load_global_config(tmp_path)

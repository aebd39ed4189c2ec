import json
import socket
from pathlib import Path

import dash_bootstrap_components as dbc
import pandas as pd

from track_explorer.core.records import NUMERIC_FIELDS
from track_explorer.ui.dash_app import create_dash_app, find_free_port


def _make_config_root(tmp_path: Path, data_file: str = "tracks.csv") -> Path:
    root = tmp_path / "config"
    root.mkdir()
    (root / "global.json").write_text(
        json.dumps({"data_file": data_file, "ui_title": "Test Tracks", "axis_height": 300})
    )
    return root


def _make_tracks_csv(path: Path) -> None:
    rows = []
    for i in range(3):
        row = {
            "track_name": f"Song {i}",
            "artists": "Artist",
            "track_genre": "pop",
            "popularity": str(75 + i),
            "Spotify_Hit": "True",
        }
        row.update({name: str(0.2 + 0.1 * i) for name in NUMERIC_FIELDS})
        row["time_signature"] = "4"
        rows.append(row)
    pd.DataFrame(rows).to_csv(path, index=False)


def test_create_dash_app_registers_callbacks(tmp_path):
    root = _make_config_root(tmp_path)
    _make_tracks_csv(root / "tracks.csv")

    app = create_dash_app(root)

    assert app.title == "Test Tracks"
    assert len(app.callback_map) == 5


def test_missing_track_file_shows_error_layout(tmp_path):
    root = _make_config_root(tmp_path, data_file="missing.csv")

    app = create_dash_app(root)

    assert isinstance(app.layout.children[1], dbc.Alert)
    assert app.layout.children[1].color == "danger"
    assert len(app.callback_map) == 0


def test_find_free_port_skips_a_listening_port():
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as busy:
        busy.bind(("127.0.0.1", 0))
        busy.listen(1)
        taken = busy.getsockname()[1]

        port = find_free_port(taken, host="127.0.0.1", attempts=20)

    assert taken < port < taken + 20

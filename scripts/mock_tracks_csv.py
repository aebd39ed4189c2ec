import numpy as np
import pandas as pd
from pathlib import Path

n_tracks = 500
platforms = ["Spotify", "Apple", "Tidal", "Deezer", "YouTube", "Amazon", "TikTok"]
genres = ["pop", "rock", "hip-hop", "edm", "latin", "r-n-b"]

rng = np.random.default_rng(7)

df = pd.DataFrame(
    {
        "track_name": [f"Track {i}" for i in range(n_tracks)],
        "artists": rng.choice([f"Artist {j}" for j in range(60)], size=n_tracks),
        "track_genre": rng.choice(genres, size=n_tracks),
        "popularity": rng.integers(50, 101, size=n_tracks),
        "danceability": rng.uniform(0.2, 0.98, size=n_tracks).round(3),
        "energy": rng.uniform(0.1, 1.0, size=n_tracks).round(3),
        "key": rng.integers(0, 12, size=n_tracks),
        "loudness": rng.uniform(-20, -1, size=n_tracks).round(2),
        "mode": rng.integers(0, 2, size=n_tracks),
        "speechiness": rng.uniform(0.02, 0.5, size=n_tracks).round(3),
        "acousticness": rng.uniform(0.0, 0.9, size=n_tracks).round(3),
        # mostly near zero, some exact zeros for the log axis
        "instrumentalness": np.where(
            rng.random(n_tracks) < 0.3, 0.0, rng.exponential(0.02, size=n_tracks)
        ).round(6),
        "liveness": rng.uniform(0.03, 0.8, size=n_tracks).round(3),
        "valence": rng.uniform(0.05, 0.97, size=n_tracks).round(3),
        "tempo_x": rng.uniform(70, 190, size=n_tracks).round(1),
        "time_signature": rng.choice([3, 4, 4, 4, 5], size=n_tracks),
        "spectral_centroid": rng.normal(2500, 600, size=n_tracks).round(1),
        "spectral_bandwidth": rng.normal(2600, 400, size=n_tracks).round(1),
        "spectral_rolloff": rng.normal(5200, 1200, size=n_tracks).round(1),
        "zero_crossing_rate": rng.uniform(0.02, 0.2, size=n_tracks).round(4),
        "chroma_stft": rng.uniform(0.25, 0.6, size=n_tracks).round(4),
        "beat_strength": rng.uniform(0.5, 2.5, size=n_tracks).round(3),
        "harmonic_to_percussive_ratio": rng.uniform(0.5, 5.0, size=n_tracks).round(3),
        "speech_to_music_ratio": rng.uniform(0.0, 0.6, size=n_tracks).round(3),
    }
)
df["Track_Score"] = df["popularity"]

for name in platforms:
    df[f"{name}_Hit"] = np.where(rng.random(n_tracks) < 0.7, "True", "False")

Path("data").mkdir(exist_ok=True)
df.to_csv("data/final_df_cleaned.csv", index=False)
print("wrote data/final_df_cleaned.csv", df.shape)

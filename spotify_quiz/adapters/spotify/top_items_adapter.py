"""Spotify adapter for the user's top tracks and artists."""

import spotipy

from spotify_quiz.domain.model import TopItem
from spotify_quiz.domain.ports import TopItemsSourcePort


class SpotifyTopItemsAdapter(TopItemsSourcePort):

    def __init__(self, sp: spotipy.Spotify):
        self.sp = sp

    def fetch_top_items(self, category: str, limit: int, window: str) -> list[TopItem]:
        if category == "tracks":
            results = self.sp.current_user_top_tracks(limit=limit, time_range=window)
        elif category == "artists":
            results = self.sp.current_user_top_artists(limit=limit, time_range=window)
        else:
            raise ValueError(f"Unsupported top items category: {category}")
        # Spotify can return null entries for items removed from the catalog
        return [TopItem(id=item["id"], name=item["name"]) for item in results.get("items", []) if item]

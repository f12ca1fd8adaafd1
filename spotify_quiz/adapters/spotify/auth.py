"""Spotify OAuth2 authentication using spotipy."""

import spotipy
from spotipy.oauth2 import SpotifyOAuth

from spotify_quiz.config import SPOTIFY_CACHE_PATH, SPOTIFY_REDIRECT_URI, SPOTIFY_SCOPE


def get_spotify_client(
    client_id: str,
    client_secret: str,
    redirect_uri: str = SPOTIFY_REDIRECT_URI,
) -> spotipy.Spotify:
    """Create an authenticated Spotify client allowed to read top items.

    Opens a browser for the OAuth flow on first run; uses the cached token afterwards.
    """
    auth_manager = SpotifyOAuth(
        client_id=client_id,
        client_secret=client_secret,
        redirect_uri=redirect_uri,
        scope=SPOTIFY_SCOPE,
        cache_path=SPOTIFY_CACHE_PATH,
    )
    return spotipy.Spotify(auth_manager=auth_manager)

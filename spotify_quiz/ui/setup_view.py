"""Flet view asking for the Spotify Developer app credentials."""

import webbrowser
from typing import Callable, Optional

import flet as ft

from spotify_quiz.config import SPOTIFY_REDIRECT_URI
from spotify_quiz.domain.ports import ConfigPort
from spotify_quiz.ui.theme import ACCENT, BG_CARD, BG_INPUT, BORDER, DANGER, FG, FG_DIM, FG_LINK

DASHBOARD_URL = "https://developer.spotify.com/dashboard"


class SetupView(ft.Column):
    """Single-step credentials form."""

    def __init__(
        self,
        page: ft.Page,
        config: ConfigPort,
        on_complete: Callable[[], None],
        on_cancel: Optional[Callable[[], None]] = None,
    ):
        super().__init__(horizontal_alignment=ft.CrossAxisAlignment.CENTER, spacing=8)
        self._page = page
        self.config = config
        self.on_complete = on_complete
        self.on_cancel = on_cancel
        self.cfg = config.load()

        self.client_id = self._field("Client ID", self.cfg.get("spotify_client_id", ""))
        self.client_secret = self._field(
            "Client Secret",
            self.cfg.get("spotify_client_secret", ""),
            password=True,
        )
        self.redirect_uri = self._field(
            "Redirect URI",
            self.cfg.get("spotify_redirect_uri", "") or SPOTIFY_REDIRECT_URI,
        )
        self.error_text = ft.Text("", color=DANGER, size=12)

        actions = [
            ft.ElevatedButton("Save and play", on_click=self._on_save, bgcolor=ACCENT, color="white"),
        ]
        if self.on_cancel:
            actions.insert(0, ft.TextButton("Cancel", on_click=lambda _: self.on_cancel(), style=ft.ButtonStyle(color=FG_DIM)))

        self.controls = [
            ft.Text("Spotify configuration", size=22, weight=ft.FontWeight.BOLD, color=FG),
            ft.Text("The quiz reads your top tracks and artists with your own Spotify app.", size=12, color=FG_DIM),
            ft.Container(
                width=560,
                bgcolor=BG_CARD,
                border=ft.border.all(1, BORDER),
                border_radius=8,
                padding=14,
                content=ft.Column(
                    [
                        ft.Text("1. Create an app in the Spotify Developer Dashboard", size=12, color=FG_DIM),
                        ft.Text(f"2. Add {SPOTIFY_REDIRECT_URI} as a Redirect URI", size=12, color=FG_DIM),
                        ft.Text("3. Copy the Client ID and Client Secret below", size=12, color=FG_DIM),
                        ft.TextButton(
                            "Open Spotify Developer Dashboard",
                            on_click=lambda _: webbrowser.open(DASHBOARD_URL),
                            style=ft.ButtonStyle(color=FG_LINK),
                        ),
                    ],
                    spacing=4,
                ),
            ),
            self.client_id,
            self.client_secret,
            self.redirect_uri,
            self.error_text,
            ft.Row(actions, alignment=ft.MainAxisAlignment.CENTER, spacing=12),
        ]

    @staticmethod
    def _field(label: str, value: str, password: bool = False) -> ft.TextField:
        return ft.TextField(
            label=label,
            value=value,
            width=560,
            password=password,
            can_reveal_password=password,
            bgcolor=BG_INPUT,
            color=FG,
            border_color=BORDER,
            focused_border_color=ACCENT,
            label_style=ft.TextStyle(color=FG_DIM),
            cursor_color=FG,
        )

    def validate(self) -> bool:
        cid = (self.client_id.value or "").strip()
        secret = (self.client_secret.value or "").strip()
        if not cid or not secret:
            self.error_text.value = "Client ID and Client Secret are required."
            return False
        self.cfg["spotify_client_id"] = cid
        self.cfg["spotify_client_secret"] = secret
        self.cfg["spotify_redirect_uri"] = (self.redirect_uri.value or "").strip() or SPOTIFY_REDIRECT_URI
        self.error_text.value = ""
        return True

    def _on_save(self, _e):
        if not self.validate():
            self._page.update()
            return
        self.config.save(self.cfg)
        self.on_complete()

"""Main Flet application: orchestrates setup, loading and quiz views."""

import logging
from typing import Callable, Optional

import flet as ft

from spotify_quiz.adapters.config.json_config_adapter import JsonConfigAdapter
from spotify_quiz.adapters.spotify.auth import get_spotify_client
from spotify_quiz.adapters.spotify.top_items_adapter import SpotifyTopItemsAdapter
from spotify_quiz.adapters.templates.json_template_adapter import JsonTemplateAdapter
from spotify_quiz.config import SPOTIFY_REDIRECT_URI
from spotify_quiz.domain.errors import InsufficientItemsError, QuizError, QuizStateError
from spotify_quiz.services.quiz_controller import QuizController
from spotify_quiz.ui.quiz_view import QuizView
from spotify_quiz.ui.setup_view import SetupView
from spotify_quiz.ui.theme import ACCENT, BG, DANGER, FG, FG_DIM
from spotify_quiz.version import __version__

logger = logging.getLogger("spotify_quiz.ui")


def _error_hint(error: Exception) -> str:
    error_str = str(error)
    if "INVALID_CLIENT" in error_str or "Invalid redirect URI" in error_str:
        return f"The redirect URI in your Spotify app settings doesn't match.\nExpected: {SPOTIFY_REDIRECT_URI}"
    if "invalid_client" in error_str.lower():
        return "Your Client ID or Client Secret is incorrect."
    if isinstance(error, InsufficientItemsError):
        return "Your listening history is too short for this quiz yet. Listen to a few more tracks and retry."
    if isinstance(error, QuizError):
        return f"The quiz could not be prepared: {error_str}"
    return "Check your Spotify Developer credentials and try again."


def _build_controller(sp, config: JsonConfigAdapter, view: QuizView) -> QuizController:
    return QuizController(
        top_items=SpotifyTopItemsAdapter(sp),
        templates=JsonTemplateAdapter(config.questions_file()),
        presenter=view,
    )


class QuizApp:
    """Routes one Flet page between setup, loading, error and quiz screens.

    ``screen`` names what is mounted, so the routing can be followed
    without a running Flet session.
    """

    def __init__(
        self,
        page: ft.Page,
        config: JsonConfigAdapter,
        client_factory: Callable[..., object] = get_spotify_client,
        controller_factory: Callable[..., QuizController] = _build_controller,
    ):
        self.page = page
        self.config = config
        self.client_factory = client_factory
        self.controller_factory = controller_factory
        self.screen = ""
        self.controller: Optional[QuizController] = None
        self.view: Optional[QuizView] = None

    def run(self) -> None:
        if self.config.is_configured():
            self.launch_quiz()
        else:
            self.show_setup()

    # Screens

    def _mount(self, screen: str, control: ft.Control) -> None:
        self.screen = screen
        self.page.controls.clear()
        self.page.add(control)
        self.page.update()

    def _show_centered(self, screen: str, controls: list[ft.Control]) -> None:
        self._mount(
            screen,
            ft.Container(
                content=ft.Column(
                    controls,
                    horizontal_alignment=ft.CrossAxisAlignment.CENTER,
                    alignment=ft.MainAxisAlignment.CENTER,
                    spacing=8,
                ),
                expand=True,
                alignment=ft.Alignment(0, 0),
            ),
        )

    def show_loading(self, *lines: str) -> None:
        self._show_centered(
            "loading",
            [ft.ProgressRing(color=ACCENT)] + [ft.Text(line, color=FG_DIM, size=12) for line in lines],
        )

    def show_error_view(self, error: Exception, title: str, retry: Callable[[], None]) -> None:
        self._show_centered("error", [
            ft.Icon(ft.Icons.ERROR_OUTLINE, color=DANGER, size=48),
            ft.Text(title, color=DANGER, size=20, weight=ft.FontWeight.BOLD),
            ft.Container(
                content=ft.Text(_error_hint(error), color=FG, size=14, text_align=ft.TextAlign.CENTER),
                padding=ft.padding.symmetric(horizontal=20),
            ),
            ft.Text(f"Technical details: {type(error).__name__}", color=FG_DIM, size=11),
            ft.Container(
                content=ft.Row(
                    [
                        ft.ElevatedButton("Retry", on_click=lambda _: retry(), bgcolor=ACCENT, color="white"),
                        ft.OutlinedButton("Reconfigure", icon=ft.Icons.SETTINGS, on_click=lambda _: self.show_setup()),
                    ],
                    alignment=ft.MainAxisAlignment.CENTER,
                    spacing=12,
                ),
                padding=ft.padding.only(top=20),
            ),
        ])

    def show_setup(self) -> None:
        logger.info("Opening Spotify setup")
        setup = SetupView(
            page=self.page,
            config=self.config,
            on_complete=self.launch_quiz,
            on_cancel=self.launch_quiz if self.config.is_configured() else None,
        )
        self._mount("setup", ft.Container(content=setup, expand=True, alignment=ft.Alignment(0, 0)))

    # Flow

    def launch_quiz(self) -> None:
        creds = self.config.spotify_credentials()
        self.show_loading("Connecting to Spotify...")

        try:
            sp = self.client_factory(
                client_id=creds.client_id,
                client_secret=creds.client_secret,
                redirect_uri=creds.redirect_uri,
            )
            user = sp.current_user()
        except Exception as e:
            logger.exception("Spotify authentication failed")
            self.show_error_view(e, "Authentication Error", self.launch_quiz)
            return

        user_name = user.get("display_name") or user.get("id")
        logger.info("Spotify auth success (user=%s)", user_name)
        self.show_loading(f"Logged in as {user_name}", "Fetching your top tracks and artists...")

        self.view = QuizView(
            page=self.page,
            on_choice=self.on_choice,
            on_next=self.on_next,
            on_restart=lambda: self.start(self.controller.restart),
        )
        self.controller = self.controller_factory(sp, self.config, self.view)
        self.start(self.controller.start)

    def start(self, step: Callable[[], object]) -> None:
        try:
            step()
        except QuizError as e:
            logger.exception("Quiz could not be started")
            self.show_error_view(e, "Quiz Error", lambda: self.start(step))
            return
        self._mount("quiz", ft.Container(content=self.view, expand=True, padding=20))

    def on_choice(self, choice: str) -> None:
        try:
            self.controller.submit_answer(choice)
        except QuizStateError:
            logger.warning("Ignored answer outside of an open question: %s", choice)

    def on_next(self, from_number: int) -> None:
        try:
            self.controller.advance(from_number)
        except QuizStateError:
            logger.warning("Next ignored for question %s, quiz has moved on", from_number)


def run_app():
    logger.info("App boot sequence started")

    def main(page: ft.Page):
        page.title = f"Spotify Top Quiz {__version__}"
        page.bgcolor = BG
        page.window.width = 760
        page.window.height = 760
        page.window.min_width = 560
        page.window.min_height = 620
        QuizApp(page, JsonConfigAdapter()).run()

    ft.app(target=main)

"""Flet quiz view: question, choice buttons, feedback and final score."""

from typing import Callable

import flet as ft

from spotify_quiz.ui.theme import ACCENT, BG, BG_CARD, BG_INPUT, BORDER, DANGER, FG, FG_DIM, SELECTED


class QuizView(ft.Column):
    """Renders the quiz for the controller and forwards the user's clicks."""

    def __init__(
        self,
        page: ft.Page,
        on_choice: Callable[[str], None],
        on_next: Callable[[int], None],
        on_restart: Callable[[], None],
    ):
        super().__init__(expand=True, horizontal_alignment=ft.CrossAxisAlignment.CENTER, spacing=12)
        self._page = page
        self.bgcolor = BG
        self.on_choice = on_choice
        self.on_next = on_next
        self.on_restart = on_restart

        self.question_number = ft.Text("", size=12, color=FG_DIM)
        self.question_text = ft.Text("", size=20, weight=ft.FontWeight.BOLD, color=FG, text_align=ft.TextAlign.CENTER)
        self.progress_bar = ft.ProgressBar(value=0, bgcolor=BG_INPUT, color=ACCENT, width=520)
        self.choice_buttons: list[ft.ElevatedButton] = []
        self.choices_column = ft.Column(spacing=8, horizontal_alignment=ft.CrossAxisAlignment.CENTER)
        self.feedback_text = ft.Text("", size=16, weight=ft.FontWeight.BOLD)
        self.answer_text = ft.Text("", size=12, color=FG_DIM)
        self.next_button = ft.ElevatedButton("Next question", bgcolor=ACCENT, color="white")
        self.answered_section = ft.Column(
            [self.feedback_text, self.answer_text, self.next_button],
            horizontal_alignment=ft.CrossAxisAlignment.CENTER,
            spacing=6,
            visible=False,
        )
        self.quiz_section = ft.Container(
            width=600,
            bgcolor=BG_CARD,
            border=ft.border.all(2, ACCENT),
            border_radius=10,
            padding=20,
            content=ft.Column(
                [
                    self.question_number,
                    self.progress_bar,
                    self.question_text,
                    ft.Container(height=6),
                    self.choices_column,
                    ft.Container(height=6),
                    self.answered_section,
                ],
                horizontal_alignment=ft.CrossAxisAlignment.CENTER,
                spacing=8,
            ),
        )

        self.score_text = ft.Text("", size=22, weight=ft.FontWeight.BOLD, color=FG)
        self.results_section = ft.Container(
            width=600,
            bgcolor=BG_CARD,
            border=ft.border.all(1, BORDER),
            border_radius=10,
            padding=20,
            visible=False,
            content=ft.Column(
                [
                    ft.Text("Quiz complete", size=14, color=ACCENT, weight=ft.FontWeight.BOLD),
                    self.score_text,
                    ft.ElevatedButton("Play again", on_click=lambda _: self.on_restart(), bgcolor=ACCENT, color="white"),
                ],
                horizontal_alignment=ft.CrossAxisAlignment.CENTER,
                spacing=10,
            ),
        )

        self.controls = [self.quiz_section, self.results_section]

    # Presenter

    def show_question(self, text: str, number: int, total: int, choices: list[str]) -> None:
        self.quiz_section.visible = True
        self.results_section.visible = False
        self.answered_section.visible = False
        # carries the number of the question it was shown for
        self.next_button.on_click = lambda _, n=number: self.on_next(n)
        self.question_number.value = f"Question {number} of {total}"
        self.progress_bar.value = (number - 1) / total if total > 0 else 0
        self.question_text.value = text
        self.choice_buttons = [self._build_choice_button(choice) for choice in choices]
        self.choices_column.controls = list(self.choice_buttons)
        self._page.update()

    def show_feedback(self, correct: bool, answer: str) -> None:
        for button in self.choice_buttons:
            button.disabled = True
        self.feedback_text.value = "Correct!" if correct else "Incorrect!"
        self.feedback_text.color = ACCENT if correct else DANGER
        self.answer_text.value = "" if correct else f"The answer was: {answer}"
        self.answered_section.visible = True
        self._page.update()

    def show_results(self, score: int, total: int) -> None:
        self.quiz_section.visible = False
        self.results_section.visible = True
        self.score_text.value = f"You scored {score} out of {total}!"
        self._page.update()

    # Actions

    def _build_choice_button(self, choice: str) -> ft.ElevatedButton:
        button = ft.ElevatedButton(
            choice,
            width=460,
            bgcolor=BG_INPUT,
            color=FG,
        )
        button.on_click = lambda _: self._select(choice, button)
        return button

    def _select(self, choice: str, button: ft.ElevatedButton):
        if button.disabled:
            return
        button.color = SELECTED
        self.on_choice(choice)

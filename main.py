"""Entry point for Spotify Top Quiz: a quiz about your own listening history."""

import logging

from spotify_quiz.config import log_level


def main():
    logging.basicConfig(
        level=log_level(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    from spotify_quiz.ui.app import run_app

    run_app()


if __name__ == "__main__":
    main()

"""JSON file-based question template source."""

import json
import logging

from spotify_quiz.domain.errors import DataLoadError
from spotify_quiz.domain.model import QuestionTemplate
from spotify_quiz.domain.ports import TemplateSourcePort

logger = logging.getLogger("spotify_quiz.templates")


class JsonTemplateAdapter(TemplateSourcePort):

    def __init__(self, path: str):
        self.path = path

    def load_templates(self) -> list[QuestionTemplate]:
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except OSError as error:
            raise DataLoadError(f"Cannot read question templates at {self.path}: {error}") from error
        except (json.JSONDecodeError, UnicodeDecodeError) as error:
            raise DataLoadError(f"Question templates at {self.path} are not valid UTF-8 JSON: {error}") from error

        if not isinstance(data, list):
            raise DataLoadError(f"Question templates at {self.path} must be a JSON array")

        templates = [QuestionTemplate.from_dict(entry) for entry in data]
        logger.info("Question templates loaded (path=%s, count=%s)", self.path, len(templates))
        return templates

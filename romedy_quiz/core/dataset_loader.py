"""Utilities for loading the quote dataset from JSON.

File format:

    {
      "quotes": [
        {"quote": "I'm just a girl, standing in front of a boy...", "movie": "Notting Hill"},
        ...
      ]
    }

Extra keys on a record (``author``, ``type``...) are ignored so datasets
shared with other tools load unchanged.
"""

from __future__ import annotations

from dataclasses import dataclass
import json
import logging
from pathlib import Path

from pydantic import BaseModel, ConfigDict, ValidationError, field_validator

from romedy_quiz.core.models import Question

_DEFAULT_DATASET_PATH = Path(__file__).resolve().parent.parent / "data" / "quotes.json"

logger = logging.getLogger(__name__)


class DatasetLoadError(Exception):
    """Raised when a quote dataset cannot be read or validated."""


class QuoteRecord(BaseModel):
    model_config = ConfigDict(extra="ignore")

    quote: str
    movie: str

    @field_validator("quote", "movie")
    @classmethod
    def _strip_and_require(cls, value: str) -> str:
        cleaned = value.strip()
        if not cleaned:
            raise ValueError("must not be empty")
        return cleaned


class QuotesDocument(BaseModel):
    model_config = ConfigDict(extra="ignore")

    quotes: list[QuoteRecord]


@dataclass(slots=True)
class LoadedDataset:
    """Container for a loaded dataset and where it came from."""

    source_path: Path
    questions: list[Question]


def load_questions_from_file(file_path: Path) -> LoadedDataset:
    try:
        text = file_path.read_text(encoding="utf-8")
    except OSError as exc:
        raise DatasetLoadError(f"Could not read {file_path}: {exc}") from exc

    questions = _parse_dataset_text(text)
    logger.info("Loaded %d quotes from %s", len(questions), file_path)
    return LoadedDataset(source_path=file_path, questions=questions)


def load_default_questions() -> LoadedDataset:
    """Load the dataset bundled with the package."""
    return load_questions_from_file(_DEFAULT_DATASET_PATH)


def _parse_dataset_text(text: str) -> list[Question]:
    try:
        raw = json.loads(text)
    except json.JSONDecodeError as exc:
        raise DatasetLoadError(f"Dataset is not valid JSON (line {exc.lineno}).") from exc

    try:
        document = QuotesDocument.model_validate(raw)
    except ValidationError as exc:
        first = exc.errors()[0]
        location = ".".join(str(part) for part in first["loc"])
        raise DatasetLoadError(f"Invalid dataset entry at '{location}': {first['msg']}") from exc

    if not document.quotes:
        raise DatasetLoadError("Dataset did not contain any quotes.")

    return [Question(text=record.quote, answer=record.movie) for record in document.quotes]

import os
import random
import sys
from pathlib import Path

import pytest

# Widgets are exercised without a display
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

# Add the project root to sys.path so romedy_quiz imports without installing
PROJECT_ROOT = Path(__file__).resolve().parent.parent
if PROJECT_ROOT.as_posix() not in sys.path:
    sys.path.insert(0, PROJECT_ROOT.as_posix())

from romedy_quiz.core.models import Question  # noqa: E402


def make_questions(labels: list[str]) -> list[Question]:
    return [Question(text=f"Quote {idx} from {label}", answer=label) for idx, label in enumerate(labels)]


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def five_questions():
    return make_questions(["Notting Hill", "Clueless", "Friends", "Mean Girls", "Love Actually"])


@pytest.fixture
def large_pool():
    labels = [f"Movie {i % 12}" for i in range(40)]
    return make_questions(labels)


@pytest.fixture
def dataset_file(tmp_path: Path):
    path = tmp_path / "quotes.json"
    path.write_text(
        '{"quotes": ['
        '{"quote": "As you wish.", "movie": "The Princess Bride"},'
        '{"quote": "  You had me at hello. ", "movie": " Jerry Maguire ", "type": "movie"},'
        '{"quote": "As if!", "movie": "Clueless"}'
        "]}",
        encoding="utf-8",
    )
    return path

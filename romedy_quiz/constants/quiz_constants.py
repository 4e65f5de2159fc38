"""Quiz-related constants shared across UI and core layers."""

QUIZ_LENGTH_CHOICES: tuple[int, ...] = (5, 10, 15, 25)
OPTION_COUNT: int = 4
DISTRACTOR_COUNT: int = OPTION_COUNT - 1
ANSWER_FEEDBACK_DELAY_MS: int = 1500

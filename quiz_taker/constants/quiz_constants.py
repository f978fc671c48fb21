"""Quiz-related constants shared across UI and core layers."""

OPTION_LETTERS: tuple[str, ...] = ("A", "B", "C", "D")
OPTION_COUNT: int = len(OPTION_LETTERS)
MIN_OPTION_COUNT: int = 2
DEFAULT_QUIZ_FILE: str = "quizzes.txt"

"""Utilities for importing quizzes from a human-friendly text file.

File format (blocks separated by blank lines or '---'):

    QUIZ: Name of the quiz that the following questions belong to
    Q: Question text (supports markdown + LaTeX). Additional lines until the
       next marker are treated as part of the question.
    A: First option text
    B: Second option text
    C: Third option text   (optional)
    D: Fourth option text  (optional)
    CORRECT: A|B|C|D

Example:

    QUIZ: Capitals

    Q: What is the capital of France?
    A: Paris
    B: Lyon
    C: Nice
    D: Tours
    CORRECT: A

A file may define several quizzes; each ``QUIZ:`` line starts a new one.
Questions that appear before any ``QUIZ:`` line are only accepted when the
caller provides a default quiz name.
"""

from __future__ import annotations

from dataclasses import dataclass, field
import logging
from pathlib import Path

from quiz_taker.constants.quiz_constants import MIN_OPTION_COUNT, OPTION_LETTERS
from quiz_taker.core.errors import QuizError

logger = logging.getLogger(__name__)


class QuizImportError(QuizError, ValueError):
    """Raised when a quiz definition cannot be parsed."""


@dataclass(slots=True)
class ImportedQuestion:
    text: str
    options: list[str]
    correct_answer: str


@dataclass(slots=True)
class ImportedQuiz:
    """A quiz name and the questions defined for it in the file."""

    name: str
    questions: list[ImportedQuestion] = field(default_factory=list)


@dataclass(slots=True)
class ImportedQuizFile:
    """Container for everything parsed from one quiz file."""

    source_path: Path
    quizzes: list[ImportedQuiz]


def load_quizzes_from_file(file_path: Path) -> ImportedQuizFile:
    text = file_path.read_text(encoding="utf-8")
    default_name = file_path.stem.replace("_", " ").strip() or None
    quizzes = parse_quiz_text(text, default_name=default_name)
    if not quizzes:
        raise QuizImportError("Quiz file did not contain any quizzes.")
    logger.info("Parsed %d quiz(zes) from %s", len(quizzes), file_path)
    return ImportedQuizFile(source_path=file_path, quizzes=quizzes)


def parse_quiz_text(text: str, default_name: str | None = None) -> list[ImportedQuiz]:
    """Parse the text format into quizzes, in the order they appear."""
    quizzes: list[ImportedQuiz] = []
    for block in _split_blocks(text):
        lines = block.splitlines()
        header = lines[0].strip()
        if header.upper().startswith("QUIZ:"):
            name = header.split(":", 1)[1].strip()
            if not name:
                raise QuizImportError("QUIZ must include a quiz name.")
            quizzes.append(ImportedQuiz(name=name))
            lines = lines[1:]
            if not any(line.strip() for line in lines):
                continue

        if not quizzes:
            if default_name is None:
                raise QuizImportError("Question found before any 'QUIZ:' line.")
            quizzes.append(ImportedQuiz(name=default_name))
        quizzes[-1].questions.append(_parse_question(lines))
    return quizzes


def _split_blocks(text: str) -> list[str]:
    blocks: list[str] = []
    current_block: list[str] = []
    for raw_line in text.splitlines():
        stripped = raw_line.strip()
        if stripped == "---":
            if current_block:
                blocks.append("\n".join(current_block).strip())
                current_block = []
            continue
        if stripped:
            current_block.append(raw_line)
        elif current_block:
            # Blank line encountered after content - finalize current block
            blocks.append("\n".join(current_block).strip())
            current_block = []
    if current_block:
        blocks.append("\n".join(current_block).strip())
    return [block for block in blocks if block]


def _parse_question(block_lines: list[str]) -> ImportedQuestion:
    question_lines: list[str] = []
    options: dict[str, str] = {}
    correct_letter: str | None = None
    current_section: str | None = None

    for raw_line in block_lines:
        line = raw_line.strip()
        if not line:
            continue

        upper = line.upper()
        if upper.startswith("QUIZ:"):
            raise QuizImportError("QUIZ must start its own block or precede a question.")

        if upper.startswith("Q:"):
            question_lines = [line[2:].strip()]
            current_section = "Q"
            continue

        if upper.startswith("CORRECT:"):
            correct_letter = line.split(":", 1)[1].strip().upper()
            current_section = None
            continue

        if len(line) > 2 and line[0].upper() in OPTION_LETTERS and line[1] == ":":
            letter = line[0].upper()
            options[letter] = line[2:].strip()
            current_section = letter
            continue

        if current_section == "Q":
            question_lines.append(line)
        elif current_section in OPTION_LETTERS:
            options[current_section] = options[current_section] + f"\n{line}"
        else:
            raise QuizImportError(
                f"Encountered text outside of a known section: '{line}'."
            )

    question_text = "\n".join(question_lines).strip()
    if not question_text:
        raise QuizImportError("Question text missing (Q: ...)")

    letters = OPTION_LETTERS[: len(options)]
    if len(options) < MIN_OPTION_COUNT or set(options) != set(letters):
        raise QuizImportError(
            f"Each question must define between {MIN_OPTION_COUNT} and "
            f"{len(OPTION_LETTERS)} options in order, starting at A."
        )

    option_list = [options[letter].strip() for letter in letters]
    if any(not option for option in option_list):
        raise QuizImportError("Option text cannot be empty.")

    if correct_letter is None:
        raise QuizImportError(f"Question '{question_text}' is missing a CORRECT line.")
    if correct_letter not in letters:
        raise QuizImportError(f"CORRECT must be one of {', '.join(letters)}.")

    return ImportedQuestion(
        text=question_text,
        options=option_list,
        correct_answer=option_list[letters.index(correct_letter)],
    )

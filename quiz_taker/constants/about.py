"""Static metadata describing QuizTaker."""

APP_NAME = "QuizTaker"
APP_VERSION = "0.1"
APP_LICENSE = "MIT License"
APP_ABOUT_TEXT = (
    "QuizTaker is a small desktop quiz trainer built with Qt. "
    "Create quizzes with LaTeX-enabled multiple-choice questions, take them, "
    "and review every question you missed."
)

HELP_TEXT = (
    "Create a quiz from the library, then add questions with four options each. "
    "Alternatively, import a .txt file written in this format:\n\n"
    "QUIZ: Radians\n\n"
    "Q: What is $30^o$ in radians?\n"
    "A: \\frac{\\pi}{2}\nB: \\frac{\\pi}{6}\nC: \\frac{\\pi}{4}\nD: \\frac{\\pi}{3}\n"
    "CORRECT: B\n\n"
    "Q: What is $45^o$ in radians?\n"
    "A: \\frac{\\pi}{3}\nB: \\frac{\\pi}{6}\nC: \\frac{\\pi}{4}\nD: \\frac{3\\pi}{4}\n"
    "CORRECT: C\n\n"
    "Answer order is shuffled every time a question is shown."
)

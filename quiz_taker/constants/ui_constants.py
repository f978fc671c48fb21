"""Qt UI constants used across widgets."""

WINDOW_TITLE: str = "QuizTaker"
PLACEHOLDER_QUESTION: str = "Enter your question text (supports Markdown + LaTeX)."
PLACEHOLDER_QUIZ_NAME: str = "New quiz name"
DEFAULT_UI_FONT_SIZE: int = 10
DEFAULT_QUIZ_FONT_SIZE: int = 14

MODE_BUTTON_LIBRARY: str = "My Quizzes"
MODE_BUTTON_IMPORT: str = "Import Quizzes"

LIBRARY_CREATE_BUTTON: str = "Create Quiz"
LIBRARY_EDIT_BUTTON: str = "Add Questions"
LIBRARY_TAKE_BUTTON: str = "Take Quiz"
LIBRARY_EMPTY_STATE: str = "No quizzes yet. Create one or import a quiz file."
LIBRARY_ROW_TEMPLATE: str = "{name} ({count} question(s))"

AUTHORING_ADD_BUTTON: str = "Add Question"
AUTHORING_DONE_BUTTON: str = "Done"

TAKING_BACK_BUTTON: str = "Previous Question"
TAKING_SUBMIT_BUTTON: str = "Submit Quiz"
TAKING_PROGRESS_TEMPLATE: str = "Question {number} of {total}"
TAKING_READY_TO_SUBMIT: str = "All questions answered. Submit the quiz to see your score."

RESULTS_RETRY_BUTTON: str = "Retry Quiz"
RESULTS_LIBRARY_BUTTON: str = "Back to Quizzes"
RESULTS_SCORE_TEMPLATE: str = "You scored {score} of {total} ({percentage:.0f}%)."
RESULTS_PERFECT_MESSAGE: str = "No missed questions. Well done!"

IMPORT_DIALOG_TITLE: str = "Select quiz file"
IMPORT_FILE_FILTER: str = "Quiz files (*.txt);;All files (*.*)"

NO_QUIZ_SELECTED_MESSAGE: str = "Please select a quiz first."
EMPTY_QUIZ_MESSAGE: str = "This quiz has no questions yet. Add some before taking it."

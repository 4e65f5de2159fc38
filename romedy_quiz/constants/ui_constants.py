"""Qt UI constants used across widgets."""

WINDOW_TITLE: str = "Test Your Romedy Knowledge!"
SETUP_HEADING: str = "The Ultimate Quiz for Rom-Com Fans!"
SETUP_DESCRIPTION: str = (
    "Think you know every heartfelt confession, witty comeback, and grand romantic "
    "gesture from your favorite romantic comedy movies and TV shows? Prove it! "
    "Identify which film or series these unforgettable quotes come from."
)
SELECT_LENGTH_LABEL: str = "Select Quiz Length:"
LENGTH_BUTTON_TEMPLATE: str = "{count} Questions"
POOL_SIZE_TEMPLATE: str = "{count} quotes available"

IMPORT_BUTTON_TEXT: str = "Import Quotes"
IMPORT_DIALOG_TITLE: str = "Select quote dataset"
IMPORT_FILE_FILTER: str = "Quote datasets (*.json);;All files (*.*)"

PROGRESS_TEMPLATE: str = "Question {number} of {total}"
SCORE_TEMPLATE: str = "Current Score: {score}"
QUIT_BUTTON_TEXT: str = "Quit Quiz"

RESULTS_HEADING: str = "Quiz Finished!"
FINAL_SCORE_TEMPLATE: str = "Your final score is: {score} out of {total}"
FINAL_PERCENT_TEMPLATE: str = "That's {percent:.0f}% correct."
RESTART_BUTTON_TEXT: str = "Restart Quiz"

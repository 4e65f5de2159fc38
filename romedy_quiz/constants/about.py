"""Static metadata describing Romedy Quiz."""

APP_NAME = "Romedy Quiz"
APP_VERSION = "0.1"
APP_LICENSE = "MIT License"
APP_ABOUT_TEXT = (
    "Romedy Quiz is a desktop trivia game built with Qt. "
    "Pick a quiz length, read a famous line, and guess which romantic comedy "
    "movie or show it comes from."
)

HELP_TEXT = (
    "Choose how many questions you want to play. Each question shows a quote and "
    "up to four titles; click the one you think it comes from. The correct title "
    "lights up green, a wrong pick turns red, and the next question follows shortly.\n\n"
    "You can play with your own quotes by importing a JSON file shaped like:\n\n"
    '{"quotes": [\n'
    '  {"quote": "I\'ll have what she\'s having.", "movie": "When Harry Met Sally..."},\n'
    '  {"quote": "As you wish.", "movie": "The Princess Bride"}\n'
    "]}"
)

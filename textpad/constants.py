"""Constants and configuration for the textpad editor."""

class EditorConstants:
    """Central configuration constants for the editor."""

    # Application identity
    APP_NAME = "textpad"
    APP_AUTHOR = "textpad"

    # Window
    DEFAULT_TITLE = "Simple Text Editor"
    TITLE_WITH_FILE = "Simple Text Editor - {}"

    # Status bar
    STATUS_FORMAT = " Words: {} | Characters: {} "

    # File operations
    TEXT_SUFFIX = ".txt"
    FILE_ENCODING = "utf-8"
    ATOMIC_SAVE_PREFIX = "."  # Prefix for temporary save files
    ATOMIC_SAVE_SUFFIX = ".tmp"  # Suffix for temporary save files

    # Error messages
    ERROR_TITLE = "Error"
    FILE_ERROR_MESSAGE = "Error {} file: {}"

    # Settings keys
    LAST_DIRECTORY = "last_directory"

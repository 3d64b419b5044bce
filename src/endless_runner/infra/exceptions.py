class HighScoreSaveError(Exception):
    """Raised when the high score cannot be written to its store."""

"""Custom exceptions for Note Flashcards."""


class NoteFlashcardsError(Exception):
    """Base exception for all Note Flashcards errors."""
    pass


class ConfigError(NoteFlashcardsError):
    """Error in configuration."""

    def __init__(self, message: str, config_key: str = None):
        self.config_key = config_key
        super().__init__(message)


class ParserError(NoteFlashcardsError):
    """Error while reading a note."""

    def __init__(self, message: str, file_path: str = None, details: str = None):
        self.file_path = file_path
        self.details = details
        super().__init__(message)


class ExportError(NoteFlashcardsError):
    """Error writing scanned cards to disk."""

    def __init__(self, message: str, output_path: str = None):
        self.output_path = output_path
        super().__init__(message)

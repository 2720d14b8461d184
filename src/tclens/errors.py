from __future__ import annotations


class TclensError(Exception):
    """Base exception for all tclens errors."""


class AnalysisError(TclensError):
    """Raised when a snippet cannot be analyzed. Terminal for the call."""


class ParseError(AnalysisError):
    """Raised by the JavaScript analyzer when the snippet is not valid syntax."""


class EmptyInputError(AnalysisError):
    """Raised when the snippet is empty or whitespace-only."""

    def __init__(self, message: str = "No code provided") -> None:
        super().__init__(message)


class SnippetTooLargeError(AnalysisError):
    """Raised when the snippet exceeds the character or line bound."""

    def __init__(self, reason: str, limit: int, actual: int) -> None:
        self.reason = reason
        self.limit = limit
        self.actual = actual
        super().__init__(f"Snippet too large (max {limit:,} {reason}, got {actual:,})")


class UnsupportedLanguageError(AnalysisError):
    """Raised when a caller asks for a language the engine does not implement."""

    def __init__(self, language: str) -> None:
        self.language = language
        super().__init__(f"Unsupported language: {language!r}")

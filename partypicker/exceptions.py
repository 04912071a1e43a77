"""
Custom exceptions for the party picker.
"""


class PartyPickerError(Exception):
    """Base exception for all custom errors."""
    pass


# Bracket Errors
class InvalidBracketSize(PartyPickerError, ValueError):
    """Raised when the competitor count is not a power of two."""
    def __init__(self, player_count: int = None, bracket_format: str = None):
        self.player_count = player_count
        self.bracket_format = bracket_format
        msg = "Number of players must be a power of 2"
        if bracket_format:
            msg += f" for {bracket_format} elimination"
        if player_count is not None:
            msg += f" (got {player_count})"
        super().__init__(msg)


# Name used by callers that think in terms of input sizes rather than brackets
InvalidInputSize = InvalidBracketSize


# Data Errors
class DataLoadFailure(PartyPickerError):
    """Raised when a track resource cannot be fetched or parsed."""
    def __init__(self, source: str = None, reason: str = None):
        self.source = source
        self.reason = reason
        msg = "Failed to load track data"
        if source:
            msg += f" from {source}"
        if reason:
            msg += f": {reason}"
        super().__init__(msg)

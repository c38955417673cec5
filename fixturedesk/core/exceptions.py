"""Exceptions raised by the fixture desk services.

Validation errors also derive from ``ValueError`` and lookup errors from
``LookupError`` so callers that only know the builtin types still catch them.
Routes translate them into HTTP responses.
"""


class FixtureDeskError(Exception):
    """Base exception for all fixture desk errors."""

    pass


# ========== Tournament / Player Exceptions ==========


class SettingsValidationError(FixtureDeskError, ValueError):
    """Raised when tournament settings are incomplete."""

    pass


class PlayerValidationError(FixtureDeskError, ValueError):
    """Raised when player details are missing or reference undefined categories."""

    pass


class DuplicateMobileError(PlayerValidationError):
    """Raised when a mobile number is already registered to another player."""

    pass


class PlayerNotFoundError(FixtureDeskError, LookupError):
    pass


class PublishError(FixtureDeskError, ValueError):
    """Raised when the tournament is not ready to be published."""

    pass


class ExportError(FixtureDeskError, ValueError):
    """Raised when there is nothing to export."""

    pass


# ========== Grouping Exceptions ==========


class GroupingError(FixtureDeskError, ValueError):
    """Base exception for player sets that cannot be split into valid groups."""

    def __init__(self, message: str, player_count: int, min_group_size: int, max_group_size: int):
        super().__init__(message)
        self.player_count = player_count
        self.min_group_size = min_group_size
        self.max_group_size = max_group_size


class NotEnoughPlayersError(GroupingError):
    """Fewer players than the minimum group size."""

    pass


class GroupingConstraintError(GroupingError):
    """No group count keeps every group within the size bounds."""

    pass


class GroupingInvariantError(FixtureDeskError, RuntimeError):
    """The grouping engine produced a group outside the size bounds.

    This is an internal error, never a user input problem.
    """

    pass


# ========== Fixture / Match Exceptions ==========


class FixtureValidationError(FixtureDeskError, ValueError):
    """Raised when fixtures are requested for an undefined category or type."""

    pass


class FixtureImportError(FixtureDeskError, ValueError):
    """Raised when an uploaded fixture document is malformed. Nothing is imported."""

    pass


class MatchValidationError(FixtureDeskError, ValueError):
    """Raised when a match update would leave the match in an invalid state."""

    pass


class MatchNotFoundError(FixtureDeskError, LookupError):
    pass


# ========== Storage Exceptions ==========


class DataFileError(FixtureDeskError, RuntimeError):
    """The tournament data file exists but does not hold a valid tournament.

    The file is left untouched so it can be repaired by hand.
    """

    pass

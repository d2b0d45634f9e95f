"""Error taxonomy for the scoreboard.

Missing data (a golfer with no solution for a hole) is not an error and
never raises; it flows through the engine as ``None``.
"""


class ConfigurationError(Exception):
    """Raised for settings that make the report impossible to produce."""


class ParseError(ConfigurationError):
    """Raised when a cutoff string cannot be resolved to an instant."""


class FetchError(Exception):
    """Raised when a data source cannot deliver holes or solution logs."""

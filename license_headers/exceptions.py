"""Error hierarchy for the license header tool."""


class LicenseHeaderError(Exception):
    """Base exception for all license header errors."""


class HeaderPatternError(LicenseHeaderError):
    """Raised when a canonical header is not detected by any header pattern."""


class GitStatusError(LicenseHeaderError):
    """Raised when the git working tree cannot be queried."""

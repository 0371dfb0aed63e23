"""Library version information."""

VERSION_MAJOR = 0
VERSION_MINOR = 1
VERSION_PATCH = 0


def version_string() -> str:
    """Return the version as ``major.minor.patch``."""
    return f"{VERSION_MAJOR}.{VERSION_MINOR}.{VERSION_PATCH}"


def version_number() -> int:
    """Return the version packed as ``major * 10000 + minor * 100 + patch``."""
    return VERSION_MAJOR * 10000 + VERSION_MINOR * 100 + VERSION_PATCH
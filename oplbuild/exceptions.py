"""Exceptions raised by the results build."""


class BuildError(Exception):
    """A fatal error that stops the build."""


class InputDirectoryError(BuildError):
    """The input directory is missing or cannot be listed."""


class WriteError(BuildError):
    """The output document could not be written."""

"""Exceptions raised by the wikitsv loaders, sorter, and commands."""


class WikiTsvError(Exception):
    """Base class for all wikitsv errors."""


class InputNotFoundError(WikiTsvError):
    """An input file could not be opened for reading."""

    def __init__(self, path, reason: str = ""):
        self.path = path
        message = f"Failed to open input file '{path}' for read"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


class UsageError(WikiTsvError):
    """A command was invoked with the wrong arguments."""


class MalformedLinkError(WikiTsvError, ValueError):
    """A title opens a wiki link or {{ill}} template but never closes it."""

    def __init__(self, title: str, closer: str):
        self.title = title
        self.closer = closer
        super().__init__(f"Title {title!r} is missing closing {closer!r}")

"""Exceptions raised by the scaffold editor."""


class ScaffoldError(Exception):
    """Base class for editor errors."""


class BindError(ScaffoldError):
    """A binding declaration names a handler the controller does not have."""


class FileReadError(ScaffoldError):
    """An uploaded file could not be read."""

    def __init__(self, filename: str) -> None:
        super().__init__(f"Error Reading File: {filename}")
        self.filename = filename


class FileParseError(ScaffoldError):
    """An uploaded file parsed as neither a JSON nor a YAML document."""

    def __init__(self, filename: str) -> None:
        super().__init__(f"Error Parsing File: {filename}")
        self.filename = filename

"""Errors raised while converting a document.

Each error carries a short tag naming the stage that failed; it is printed
next to the message when the error reaches the command line.
"""


class ConversionError(Exception):
    tag = "Error"

    def __init__(self, message: str, tag: str | None = None):
        super().__init__(message)
        self.message = message
        if tag is not None:
            self.tag = tag

    def __str__(self) -> str:
        return self.message


class InputError(ConversionError):
    tag = "FileSystem"


class PageRangeError(ConversionError):
    tag = "PageValidation"


class RenderError(ConversionError):
    tag = "PDF"


class OutputError(ConversionError):
    tag = "FileSystem"

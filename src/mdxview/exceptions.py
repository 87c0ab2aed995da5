"""Error taxonomy for the MDX render pipeline

MdxError
  - FrontmatterError      malformed front-block (bad YAML, not a mapping, never closed)
  - MarkupCompileError    unexpected failure inside the markdown compiler
  - MarkupParseError      compiled markup is not well-formed
  - SourceReadError       a source file cannot be read or is not UTF-8

Unknown elements are not errors; they are logged and rendered empty.
"""

from typing import Optional


class MdxError(Exception):
    """Base class for every error raised by the render pipeline."""

    def __init__(self, message: str, original_error: Optional[Exception] = None):
        super().__init__(message)
        self.message = message
        self.original_error = original_error


class FrontmatterError(MdxError, ValueError):
    """The document opens a front-block whose content cannot be used."""


class MarkupCompileError(MdxError, RuntimeError):
    """The markdown compiler failed on the document body."""


class MarkupParseError(MdxError, ValueError):
    """The compiled markup is not a well-formed element tree."""

    def __init__(
        self,
        message: str,
        line: Optional[int] = None,
        column: Optional[int] = None,
        original_error: Optional[Exception] = None,
        ):
        if line is not None:
            message = f"{message} (line {line}, column {column})"
        super().__init__(message, original_error)
        self.line = line
        self.column = column


class SourceReadError(MdxError):
    """A source document could not be read from disk or decoded as UTF-8."""

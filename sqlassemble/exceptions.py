from typing import Any, Optional

__all__ = (
    "BindError",
    "ExtraParameterError",
    "MissingParameterError",
    "ModelError",
    "RenderError",
    "SQLAssembleError",
    "UnsupportedValueError",
)


class SQLAssembleError(Exception):
    """Base exception class from which all sqlassemble exceptions inherit."""

    detail: str

    def __init__(self, *args: Any, detail: str = "") -> None:
        """Initialize ``SQLAssembleError``.

        Args:
            *args: args are converted to :class:`str` before passing to :class:`Exception`
            detail: detail of the exception.
        """
        str_args = [str(arg) for arg in args if arg]
        if not detail:
            if str_args:
                detail, *str_args = str_args
            elif hasattr(self, "detail"):
                detail = self.detail
        self.detail = detail
        super().__init__(*str_args)

    def __repr__(self) -> str:
        if self.detail:
            return f"{self.__class__.__name__} - {self.detail}"
        return self.__class__.__name__

    def __str__(self) -> str:
        return " ".join((*self.args, self.detail)).strip()


class ModelError(SQLAssembleError):
    """Structural misuse of a statement caught while it is being built."""

    def __init__(self, message: Optional[str] = None) -> None:
        if message is None:
            message = "Invalid statement construction."
        super().__init__(message)


class RenderError(SQLAssembleError):
    """A statement is missing a part required to render it."""

    def __init__(self, message: Optional[str] = None) -> None:
        if message is None:
            message = "Issues rendering SQL statement."
        super().__init__(message)


# -- Bind Errors --
class BindError(SQLAssembleError):
    """Base class for placeholder binding errors."""

    sql: Optional[str]

    def __init__(self, message: str, sql: Optional[str] = None) -> None:
        """Initialize with optional SQL context."""
        detail_message = message
        if sql:
            detail_message = f"{message}\nSQL: {sql}"
        super().__init__(detail=detail_message)
        self.sql = sql


class MissingParameterError(BindError):
    """Raised when a placeholder has no matching value."""


class ExtraParameterError(BindError):
    """Raised when more positional values are supplied than placeholders exist."""


class UnsupportedValueError(BindError):
    """Raised when a bound value has no SQL literal representation."""

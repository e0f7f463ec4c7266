"""Exceptions raised by the fieldprint pipeline."""


class FieldPrintError(Exception):
    """Base class for every error fieldprint reports to the user."""
    pass


class FieldSpecSyntaxError(FieldPrintError):
    """Raised when a braced field reference cannot be parsed."""

    def __init__(self, token_text: str, argument: str = ""):
        self.token_text = token_text
        self.argument = argument
        message = f"invalid explicit field specifier: {token_text}"
        if argument and argument != token_text:
            message += f" (in argument {argument!r})"
        super().__init__(message)


class EngineLaunchError(FieldPrintError):
    """Raised when the awk binary cannot be started."""

    def __init__(self, engine: str, cause: OSError):
        self.engine = engine
        self.cause = cause
        super().__init__(f"cannot launch '{engine}': {cause.strerror or cause}")

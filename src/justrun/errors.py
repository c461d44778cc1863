from __future__ import annotations


class JustrunError(Exception):
    pass


class ConfigError(JustrunError):
    pass


class MissingFileError(JustrunError):
    pass


class LoadError(JustrunError):
    def __init__(self, message: str, line: int | None = None) -> None:
        self.line = line
        if line is not None:
            message = f"line {line}: {message}"
        super().__init__(message)


class DuplicateNameError(LoadError):
    pass


class MalformedBlockError(LoadError):
    pass


class DispatchError(JustrunError):
    pass


class UnknownRecipeError(DispatchError):
    def __init__(self, name: str, suggestions: list[str] | None = None) -> None:
        self.name = name
        self.suggestions = list(suggestions or [])
        message = f"Justfile does not contain recipe {name!r}"
        if self.suggestions:
            message += f". Did you mean {self.suggestions[0]!r}?"
        super().__init__(message)


class SpawnFailureError(DispatchError):
    def __init__(self, program: str, cause: OSError) -> None:
        self.program = program
        self.cause = cause
        reason = cause.strerror or str(cause)
        super().__init__(f"Failed to start {program!r}: {reason}")


class PassthroughError(DispatchError):
    def __init__(self, name: str, reason: str) -> None:
        self.name = name
        super().__init__(f"Cannot forward arguments to recipe {name!r}: {reason}")

# quantalogic_strictscope/exceptions.py
from typing import Any


class StrictScopeError(NameError):
    """Base class for declare-before-use violations."""

    def __init__(self, message: str, name: Any) -> None:
        super().__init__(message)
        self.name: Any = name
        self.message = message

    def __str__(self):
        return self.message


class UndeclaredVariableError(StrictScopeError):
    def __init__(self, name: Any) -> None:
        super().__init__(f"variable '{name}' is not declared", name)


class UndeclaredAssignmentError(StrictScopeError):
    def __init__(self, name: Any) -> None:
        super().__init__(f"assignment to undeclared variable '{name}'", name)

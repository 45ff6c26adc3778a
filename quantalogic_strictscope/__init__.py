# quantalogic_strictscope/__init__.py
from .context import ContextKind, caller_frame, classify_caller, fixed_classifier
from .exceptions import StrictScopeError, UndeclaredAssignmentError, UndeclaredVariableError
from .scope import StrictScope, strict

__version__ = '1.2.1'

__all__ = [
    'StrictScope',
    'strict',
    'ContextKind',
    'caller_frame',
    'classify_caller',
    'fixed_classifier',
    'StrictScopeError',
    'UndeclaredVariableError',
    'UndeclaredAssignmentError',
]

# quantalogic_strictscope/context.py
"""
Calling-context classification for the strict scope guard.

The guard needs to know what kind of code is touching a scope: top-level
code is allowed to introduce new names, nested code is not, and code with no
source-level caller is exempt from the undeclared-read check.
"""

import enum
import inspect
import logging
from types import FrameType
from typing import Callable, Optional, Tuple

logger = logging.getLogger(__name__)

# Frames from these modules are part of the access path, not its origin.
INTERNAL_MODULES: Tuple[str, ...] = (
    __name__.rpartition('.')[0],
    '_collections_abc',
    'collections.abc',
)


class ContextKind(enum.Enum):
    NATIVE = 'native'
    MAIN = 'main'
    NESTED = 'nested'


Classifier = Callable[[int], ContextKind]


def _is_internal(frame: FrameType) -> bool:
    module = frame.f_globals.get('__name__') or ''
    return any(module == name or module.startswith(name + '.') for name in INTERNAL_MODULES)


def _is_native(frame: FrameType) -> bool:
    return frame.f_code.co_filename.startswith('<frozen')


def caller_frame(level: int = 1) -> Optional[FrameType]:
    """
    Find the frame of the code that reached into a scope.

    Args:
        level: 1 for the first frame outside this package, 2 for its caller, and so on.

    Returns:
        The frame, or None when the interpreter does not expose frames or the stack is too shallow.
    """
    frame = inspect.currentframe()
    while frame is not None and _is_internal(frame):
        frame = frame.f_back
    for _ in range(level - 1):
        if frame is None:
            break
        frame = frame.f_back
    return frame


def classify_caller(level: int = 1) -> ContextKind:
    frame = caller_frame(level)
    try:
        if frame is None or _is_native(frame):
            kind = ContextKind.NATIVE
        elif frame.f_code.co_name == '<module>':
            kind = ContextKind.MAIN
        else:
            kind = ContextKind.NESTED
    finally:
        del frame
    logger.debug(f"Classified caller at level {level} as {kind.value}")
    return kind


def fixed_classifier(kind: ContextKind) -> Classifier:
    """Build a classifier that reports the same context kind for every access."""
    def classify(level: int = 1) -> ContextKind:
        return kind
    return classify

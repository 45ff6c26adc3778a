# quantalogic_strictscope/scope.py
"""
Declare-before-use guard over a namespace mapping.

Every name has to be declared by a regular assignment (assigning None will do)
from top-level code before it can be read anywhere or assigned from inside a
function.
"""

import logging
from collections.abc import MutableMapping
from typing import Any, Dict, FrozenSet, Iterator, Optional, Tuple

from .context import Classifier, ContextKind, classify_caller
from .exceptions import UndeclaredAssignmentError, UndeclaredVariableError

logger = logging.getLogger(__name__)

_ABSENT = object()


class StrictScope(MutableMapping):
    def __init__(
        self,
        env: Any,
        level: int = 1,
        classifier: Optional[Classifier] = None,
        allow_exemptions: bool = True,
    ) -> None:
        self.env: Any = env
        self.level: int = level
        self.classifier: Classifier = classifier if classifier is not None else classify_caller
        self.allow_exemptions: bool = allow_exemptions
        self._declared: Dict[Any, bool] = {}

    def _lookup(self, name: Any) -> Any:
        try:
            return self.env[name]
        except LookupError:
            return _ABSENT

    def _context(self, context: Optional[ContextKind]) -> ContextKind:
        if context is not None:
            return context
        return self.classifier(self.level)

    def _mark(self, name: Any, kind: Optional[ContextKind] = None) -> None:
        if name not in self._declared:
            self._declared[name] = True
            logger.debug(f"Declared '{name}'" + (f" from {kind.value} context" if kind else ""))

    @property
    def declared(self) -> FrozenSet[Any]:
        return frozenset(self._declared)

    def is_declared(self, name: Any) -> bool:
        return self._declared.get(name, False)

    def read(self, name: Any, default: Any = None, context: Optional[ContextKind] = None) -> Any:
        """
        Read a name, failing if it was never declared.

        Args:
            name: The variable name.
            default: Returned when the name is absent but the read is allowed.
            context: Context kind of the reader; asked from the classifier when omitted.

        Returns:
            The bound value, or default.

        Raises:
            UndeclaredVariableError: The name is absent, undeclared, and the reader is not exempt.
        """
        value = self._lookup(name)
        if value is not _ABSENT:
            self._mark(name)
            return value
        if name in self._declared:
            return default
        kind = self._context(context)
        if kind is not ContextKind.NATIVE or not self.allow_exemptions:
            logger.error(f"Read of undeclared variable '{name}' from {kind.value} context")
            raise UndeclaredVariableError(name)
        return default

    def write(self, name: Any, value: Any, context: Optional[ContextKind] = None) -> None:
        """
        Assign a name; top-level and native writes declare it.

        Raises:
            UndeclaredAssignmentError: The name is absent, undeclared, and the writer may not declare it.
        """
        kind = None
        if self._lookup(name) is _ABSENT and name not in self._declared:
            kind = self._context(context)
            if kind is ContextKind.NESTED or not self.allow_exemptions:
                logger.error(f"Assignment to undeclared variable '{name}' from {kind.value} context")
                raise UndeclaredAssignmentError(name)
        self._mark(name, kind)
        self.env[name] = value

    def declare(self, name: Any, value: Any = None) -> None:
        self._mark(name)
        self.env[name] = value

    def pairs(self) -> Iterator[Tuple[Any, Any]]:
        items = getattr(self.env, 'items', None)
        if callable(items):
            return iter(items())
        return ((key, self.env[key]) for key in self.env)

    def __getitem__(self, name: Any) -> Any:
        value = self.read(name, _ABSENT)
        if value is _ABSENT:
            raise KeyError(name)
        return value

    def __setitem__(self, name: Any, value: Any) -> None:
        self.write(name, value)

    def __delitem__(self, name: Any) -> None:
        del self.env[name]
        logger.debug(f"Deleted '{name}', it stays declared")

    def __contains__(self, name: Any) -> bool:
        return self._lookup(name) is not _ABSENT

    def __iter__(self) -> Iterator[Any]:
        return iter(self.env)

    def __len__(self) -> int:
        """A base with its own __len__ answers for itself; a dict counts every key, not only 1..n."""
        length = getattr(type(self.env), '__len__', None)
        if length is not None:
            return length(self.env)
        n = 0
        while self._lookup(n + 1) is not _ABSENT:
            n += 1
        return n

    def __repr__(self):
        return f"StrictScope({self.env!r})"


def strict(
    env: Any,
    level: int = 1,
    classifier: Optional[Classifier] = None,
    allow_exemptions: bool = True,
) -> StrictScope:
    """
    Require variable declarations before use in env.

    Returns the guard to use in place of env. level picks the caller frame
    the classifier inspects; 1 means the code touching the scope. Raising
    level loosens the check: with level=2 a function called from top-level
    code is judged as top-level and may declare new names.
    """
    return StrictScope(env, level=level, classifier=classifier, allow_exemptions=allow_exemptions)

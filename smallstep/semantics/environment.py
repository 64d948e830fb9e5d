"""Variable bindings threaded through statement reduction."""

from collections.abc import Mapping

from smallstep.lang.error import TypeMismatch, UnboundVariable
from smallstep.semantics.nodes import Boolean, Number

VALUES = (Number, Boolean)


class Environment(Mapping):
    """Immutable snapshot of name: value bindings, where every value is an irreducible Number or Boolean. Assignment
    never edits an Environment: with_binding returns a new one, so snapshots that were handed out stay valid.
    """

    def __init__(self, bindings=None, **kwargs):
        self._bindings = {}
        for name, value in {**(bindings or {}), **kwargs}.items():
            Environment._check(name, value)
            self._bindings[name] = value

    @staticmethod
    def _check(name, value):
        """Raises TypeMismatch if name: value is not a valid binding."""
        if not isinstance(name, str):
            raise TypeMismatch("'{}' is not a valid variable name", repr(name))
        if type(value) not in VALUES:
            raise TypeMismatch("'{}' cannot be bound to '{}': only numbers and booleans are values", (value, name))

    def lookup(self, name):
        """Returns the value bound to name. Raises UnboundVariable if there is none."""
        try:
            return self._bindings[name]
        except KeyError:
            raise UnboundVariable(name, self.display()) from None

    def with_binding(self, name, value):
        """Returns a new Environment with name bound to value, overwriting any previous binding of name."""
        Environment._check(name, value)

        environment = Environment.__new__(Environment)
        environment._bindings = {**self._bindings, name: value}
        return environment

    def display(self):
        """Format: {x: 1, y: true}"""
        return "{" + ", ".join(f"{name}: {value}" for name, value in self._bindings.items()) + "}"

    def __getitem__(self, name):
        return self._bindings[name]

    def __iter__(self):
        return iter(self._bindings)

    def __len__(self):
        return len(self._bindings)

    def __repr__(self):
        return f"Environment({self.display()})"

    def __str__(self):
        return self.display()

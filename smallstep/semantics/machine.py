"""Driver that repeatedly reduces a SIMPLE program until it reaches normal form."""

from smallstep.lang.error import ContractViolation, StepLimitExceeded
from smallstep.semantics.environment import Environment
from smallstep.semantics.reduction import display, is_statement, reduce, reducible


class Machine:
    """Holds the current (node, environment) state of a program and steps it one reduction at a time.

    A program whose while-loop condition never becomes false never reaches normal form, and an unbounded run of it never
    returns. Pass max_steps to run (or slice states) to bound execution.
    """
    DEFAULT_STEP_LIMIT = None  # unbounded

    def __init__(self, node, environment=None, observer=None):
        """observer, if given, is called with (node, environment) for every state run passes through, including the
        final one.
        """
        if not isinstance(environment, Environment):
            environment = Environment(environment)

        self.node = node
        self.environment = environment
        self.observer = observer
        self.steps = 0

    @property
    def reducible(self):
        """Whether or not the held node has another step to take."""
        return reducible(self.node)

    def step(self):
        """Reduces the held node once and returns the new node. Stepping an irreducible node is a contract violation,
        not a no-op: it raises ContractViolation and leaves the machine untouched.
        """
        if not self.reducible:
            raise ContractViolation("'{}' is in normal form and cannot be stepped", self.node)

        if is_statement(self.node):
            self.node, self.environment = reduce(self.node, self.environment)
        else:
            self.node = reduce(self.node, self.environment)

        self.steps += 1
        return self.node

    def states(self):
        """Lazily yields (node, environment) before every step and once more for the final, irreducible state."""
        while self.reducible:
            yield self.node, self.environment
            self.step()
        yield self.node, self.environment

    def run(self, max_steps=DEFAULT_STEP_LIMIT):
        """Steps until the held node is irreducible, reporting every state to self.observer. Returns the final (node,
        environment) pair. Raises StepLimitExceeded if max_steps steps were taken and the node is still reducible.
        """
        start = self.steps
        for node, environment in self.states():
            if self.observer is not None:
                self.observer(node, environment)

            if max_steps is not None and self.steps - start >= max_steps and reducible(node):
                raise StepLimitExceeded(node, max_steps)

        return self.node, self.environment

    def display(self):
        """Trace line format: <node>, <environment>"""
        return f"{display(self.node)}, {self.environment.display()}"

    def __repr__(self):
        return f"Machine({self.display()})"

    def __str__(self):
        return self.display()

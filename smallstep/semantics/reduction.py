"""Small-step reduction rules of the SIMPLE language.

Each rule rewrites a node by exactly one step:

```
Variable                 x                  ->  environment[x]
binary operator          l op r             ->  l' op r       if l is reducible
                                            ->  l op r'       else if r is reducible
                                            ->  value         otherwise (both operands are Numbers)
Assign                   x = e, env         ->  x = e', env   if e is reducible
                                            ->  literally_doing_nothing, env[x := e]
If                       if (c) {t} else {f} ->  if (c') ...  if c is reducible
                                            ->  t / f         if c is true / false
While                    while (c) {b}      ->  if (c) { b; while (c) {b} } else { literally_doing_nothing }
Sequence                 s1; s2             ->  s2            if s1 is literally_doing_nothing
                                            ->  s1'; s2       with the environment produced by s1
```

Expressions reduce to a new node. Statements reduce to a (node, environment) pair, because assignment produces a new
environment. Neither ever modifies the node or the environment it was given.

Sources: Tom Stuart, "Understanding Computation", ch. 2 (small-step semantics),
         https://en.wikipedia.org/wiki/Operational_semantics#Small-step_semantics
"""

from smallstep.lang.error import ContractViolation, TypeMismatch
from smallstep.semantics.environment import Environment
from smallstep.semantics.nodes import (Add, Assign, Boolean, DoNothing, If, LessThan, Multiply, Number, Sequence,
                                       OPERATORS, Statement, Variable, While, display)

IRREDUCIBLE = (Number, Boolean, DoNothing)
REDUCIBLE = (Variable, Add, Multiply, LessThan, Assign, If, While, Sequence)

COMBINE = {
    Add: lambda left, right: Number(left + right),
    Multiply: lambda left, right: Number(left * right),
    LessThan: lambda left, right: Boolean(left < right),
}

__all__ = ["reducible", "reduce", "display", "is_statement"]


def reducible(node):
    """Whether or not node has another step to take. Depends only on the variant of node, never on its contents."""
    if isinstance(node, IRREDUCIBLE):
        return False
    elif isinstance(node, REDUCIBLE):
        return True
    raise ContractViolation("'{}' is not a SIMPLE node", type(node).__name__)


def is_statement(node):
    """Whether or not reduce(node, ...) produces a (node, environment) pair."""
    return isinstance(node, Statement)


def reduce(node, environment):
    """Reduces node by one step under environment. Returns the reduced node if node is an expression, or a pair of
    (reduced node, new environment) if node is a statement. Raises ContractViolation if node is irreducible.
    """
    if not reducible(node):
        raise ContractViolation("'{}' is irreducible and cannot be reduced", node)
    if not isinstance(environment, Environment):
        environment = Environment(environment)

    if isinstance(node, Variable):
        return environment.lookup(node.name)

    elif type(node) in COMBINE:
        return _reduce_operator(node, environment)

    elif isinstance(node, Assign):
        if reducible(node.expression):
            return Assign(node.name, reduce(node.expression, environment)), environment
        return DoNothing(), environment.with_binding(node.name, node.expression)

    elif isinstance(node, If):
        if reducible(node.condition):
            return If(reduce(node.condition, environment), node.consequence, node.alternative), environment
        elif node.condition == Boolean(True):
            return node.consequence, environment
        elif node.condition == Boolean(False):
            return node.alternative, environment

        start = len("if (")
        msg = "'{}' has a condition that is neither true nor false: '{}'"
        raise TypeMismatch(msg, (node, node.condition), start=start, end=start + len(display(node.condition)))

    elif isinstance(node, While):
        return If(node.condition, Sequence(node.body, node), DoNothing()), environment

    # only Sequence is left
    if node.first == DoNothing():
        return node.second, environment

    reduced_first, reduced_environment = reduce(node.first, environment)
    return Sequence(reduced_first, node.second), reduced_environment


def _reduce_operator(node, environment):
    """Left operand first, then right operand, then combine. Operands must both be Numbers to be combined."""
    operator = type(node)

    if reducible(node.left):
        return operator(reduce(node.left, environment), node.right)
    elif reducible(node.right):
        return operator(node.left, reduce(node.right, environment))

    start = 0
    for operand in (node.left, node.right):
        if not isinstance(operand, Number):
            msg = "'{}' has an operand that is not a number: '{}'"
            raise TypeMismatch(msg, (node, operand), start=start, end=start + len(display(operand)))
        start += len(display(operand)) + len(f" {OPERATORS[operator]} ")

    return COMBINE[operator](node.left.value, node.right.value)

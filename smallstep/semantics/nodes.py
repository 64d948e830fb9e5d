"""Abstract syntax tree of the SIMPLE language: a closed set of expression and statement variants.

Formally, the tree can be described as

```
<expression> ::= Number(<int>)                       ; irreducible value
               | Boolean(<bool>)                     ; irreducible value
               | Variable(<name>)                    ; reduces to its binding in the environment
               | Add(<expression>, <expression>)     ; left + right
               | Multiply(<expression>, <expression>)
               | LessThan(<expression>, <expression>)

<statement>  ::= DoNothing()                         ; the only irreducible statement
               | Assign(<name>, <expression>)
               | If(<expression>, <statement>, <statement>)
               | While(<expression>, <statement>)
               | Sequence(<statement>, <statement>)
```

Every variant is a frozen dataclass, so equality is structural and a node can never be edited once it has been
observed. Reduction builds fresh nodes instead (see reduction.py). Constructors check their fields, so a tree that
does not match the grammar above cannot be built.
"""

from dataclasses import dataclass

from smallstep.lang.error import ContractViolation, TypeMismatch


class Node:
    """Superclass of every variant. Not instantiated directly."""

    def _check(self, field, kind):
        """Raises TypeMismatch if the value of field is not an instance of kind."""
        value = getattr(self, field)
        if isinstance(value, kind) and not (kind is int and isinstance(value, bool)):
            return

        expr = value if isinstance(value, Node) else repr(value)
        msg = "'{}' cannot be the {} of {}, expected {}"
        raise TypeMismatch(msg, (expr, field, type(self).__name__, _KIND_NAMES[kind]))

    def __str__(self):
        return display(self)

    def __repr__(self):
        return f"<<{self}>>"


class Expression(Node):
    """Superclass of the expression variants: they reduce to a value and never touch the environment."""


class Statement(Node):
    """Superclass of the statement variants: each step may also produce a new environment."""


_KIND_NAMES = {Expression: "an expression", Statement: "a statement", int: "an integer", bool: "a boolean",
               str: "a name"}

variant = dataclass(frozen=True, repr=False)


# EXPRESSIONS

@variant
class Number(Expression):
    value: int

    def __post_init__(self):
        self._check("value", int)


@variant
class Boolean(Expression):
    value: bool

    def __post_init__(self):
        self._check("value", bool)


@variant
class Variable(Expression):
    name: str

    def __post_init__(self):
        self._check("name", str)


@variant
class BinaryOperator(Expression):
    """Expression with two operands that are reduced left to right, then combined."""
    left: Expression
    right: Expression

    def __post_init__(self):
        self._check("left", Expression)
        self._check("right", Expression)


@variant
class Add(BinaryOperator):
    pass


@variant
class Multiply(BinaryOperator):
    pass


@variant
class LessThan(BinaryOperator):
    pass


# STATEMENTS

@variant
class DoNothing(Statement):
    """Terminal statement. Having no fields, every DoNothing is equal to every other."""


@variant
class Assign(Statement):
    name: str
    expression: Expression

    def __post_init__(self):
        self._check("name", str)
        self._check("expression", Expression)


@variant
class If(Statement):
    condition: Expression
    consequence: Statement
    alternative: Statement

    def __post_init__(self):
        self._check("condition", Expression)
        self._check("consequence", Statement)
        self._check("alternative", Statement)


@variant
class While(Statement):
    condition: Expression
    body: Statement

    def __post_init__(self):
        self._check("condition", Expression)
        self._check("body", Statement)


@variant
class Sequence(Statement):
    first: Statement
    second: Statement

    def __post_init__(self):
        self._check("first", Statement)
        self._check("second", Statement)


OPERATORS = {Add: "+", Multiply: "*", LessThan: "<"}


def display(node):
    """Human-readable form of node, as used in machine traces."""
    if isinstance(node, Number):
        return str(node.value)
    elif isinstance(node, Boolean):
        return "true" if node.value else "false"
    elif isinstance(node, Variable):
        return node.name
    elif type(node) in OPERATORS:
        return f"{display(node.left)} {OPERATORS[type(node)]} {display(node.right)}"
    elif isinstance(node, DoNothing):
        return "literally_doing_nothing"
    elif isinstance(node, Assign):
        return f"{node.name} = {display(node.expression)}"
    elif isinstance(node, If):
        return (f"if ({display(node.condition)}) {{ {display(node.consequence)} }} "
                f"else {{ {display(node.alternative)} }}")
    elif isinstance(node, While):
        return f"while ({display(node.condition)}) {{ {display(node.body)} }}"
    elif isinstance(node, Sequence):
        return f"{display(node.first)}; {display(node.second)}"

    raise ContractViolation("'{}' is not a SIMPLE node", type(node).__name__)

"""Small-step interpreter for SIMPLE, a toy imperative language of numbers, booleans, variables, assignment,
conditionals, sequencing and while-loops.

For reference:
- "Small-step semantics": a program runs as a chain of single rewriting steps over its syntax tree, each step a pure
  function of the current (node, environment) pair, until the tree can no longer be reduced (normal form)
- "Environment": the variable bindings a program runs under, replaced (never edited) on every assignment

Basic program flow:
    1. Construction: there is no parser, a program is built directly from the node classes in semantics/nodes.py
    2. Reduction: semantics/reduction.py rewrites a node by exactly one step
    3. Driving: semantics/machine.py steps a (node, environment) pair until it is irreducible, reporting every state
       it passes through

The `lang` package wraps the engine for humans: error reporting, bundled example programs and an interactive shell.
"""

from smallstep.semantics import (Add, Assign, Boolean, DoNothing, Environment, If, LessThan, Machine, Multiply, Number,
                                 Sequence, Variable, While, display, reduce, reducible)

__version__ = "0.1.0"

"""The reduction engine: node variants, environments, single-step reduction rules and the machine that drives them."""

from smallstep.semantics.environment import Environment
from smallstep.semantics.machine import Machine
from smallstep.semantics.nodes import (Add, Assign, Boolean, DoNothing, Expression, If, LessThan, Multiply, Node,
                                       Number, Sequence, Statement, Variable, While, display)
from smallstep.semantics.reduction import reduce, reducible

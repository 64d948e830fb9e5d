"""Example SIMPLE programs, built directly from node constructors (SIMPLE has no parser). Used by the command line and
the shell, and handy as fixtures.
"""

from dataclasses import dataclass

from smallstep.lang.error import UnknownProgram
from smallstep.semantics import (Add, Assign, Boolean, Environment, If, LessThan, Machine, Multiply, Number,
                                 Variable, While)


@dataclass(frozen=True)
class Program:
    """A named (node, environment) pair ready to be handed to a Machine."""
    name: str
    description: str
    node: object
    environment: Environment

    def machine(self, observer=None):
        """Returns a fresh Machine for this program."""
        return Machine(self.node, self.environment, observer)


def _doubling_loop(x):
    return While(
        LessThan(Variable("x"), Variable("y")),
        Assign("x", Multiply(Variable("x"), Number(2)))
    ), Environment(x=Number(x), y=Number(5))


PROGRAMS = {program.name: program for program in [
    Program(
        "arithmetic", "9 * -2 + (5 + 6), reduced innermost and leftmost first",
        Add(Multiply(Number(9), Number(-2)), Add(Number(5), Number(6))),
        Environment()
    ),
    Program(
        "comparison", "9 * -2 < 5 + 6",
        LessThan(Multiply(Number(9), Number(-2)), Add(Number(5), Number(6))),
        Environment()
    ),
    Program(
        "nested", "1 * ((2 + 3) * 4)",
        Multiply(Number(1), Multiply(Add(Number(2), Number(3)), Number(4))),
        Environment()
    ),
    Program(
        "variables", "x + y, looked up in the environment",
        Add(Variable("x"), Variable("y")),
        Environment(x=Number(3), y=Number(6))
    ),
    Program(
        "if", "branch on a boolean variable",
        If(Variable("x"), Assign("y", Number(1)), Assign("y", Number(2))),
        Environment(x=Boolean(True))
    ),
    Program("while", "double x until it is no longer less than y", *_doubling_loop(1)),
    Program(
        "increment", "x = x + 1",
        Assign("x", Add(Variable("x"), Number(1))),
        Environment(x=Number(2))
    ),
    Program("diverge", "double x while x < y, starting from -1 (never terminates)", *_doubling_loop(-1)),
]}


def get_program(name):
    """Returns the bundled program called name. Raises UnknownProgram if there is none."""
    try:
        return PROGRAMS[name]
    except KeyError:
        raise UnknownProgram(name) from None

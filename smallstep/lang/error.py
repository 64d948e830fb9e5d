"""Error handling for the SIMPLE small-step interpreter. Only GenericExceptions should be encountered while reducing a
program: if another type of error is raised and makes it all the way to ErrorHandler, it is assumed to be an internal
issue.

Reduction never recovers from an error. Everything raised by the semantics propagates out of Machine.step/run and is
reported here, at the outer surface (command line or shell).
"""

import sys

from termcolor import colored


class GenericException(Exception):
    """Templates an error/warning message so that it can be used to throw a SIMPLE error/warning. exprs are the
    displayed node snippets that are substituted into msg.
    """

    def __init__(self, msg, exprs=None, start=0, end=-1, diagnosis=True, internal=False):
        """Parses args for GenericException or warning."""
        if exprs is None:
            exprs = ""
        if not isinstance(exprs, (list, tuple)):
            exprs = [exprs]  # a single snippet: str or Node
        exprs = [str(expr) for expr in exprs]

        self.plain = msg.format(*exprs)
        self.msg = msg.format(*(colored(expr, attrs=["bold"]) for expr in exprs))  # color expr snippets
        self.expr = exprs[0]  # exprs[0] should be the offending expr that caused the error
        self.end = end if end != -1 else len(self.expr)  # needed for error display

        self.start = start
        self.diagnosis = diagnosis
        self.internal = internal

        super().__init__(self.plain)


class UnboundVariable(GenericException):
    """A variable was looked up in an environment that has no binding for it."""

    def __init__(self, name, environment):
        super().__init__("'{}' is not bound in environment {}", (name, environment), diagnosis=False)
        self.name = name


class TypeMismatch(GenericException):
    """A node or value of the wrong kind was combined, branched on, bound, or used as a child."""


class StepLimitExceeded(GenericException):
    """A bounded run stopped before its program reached normal form."""

    def __init__(self, node, max_steps):
        super().__init__("'{}' did not reach normal form within {} steps", (node, max_steps))
        self.node = node
        self.max_steps = max_steps


class ContractViolation(GenericException):
    """The reduction engine was asked to do something it never should, e.g. reduce an irreducible node."""

    def __init__(self, msg, exprs=None):
        super().__init__(msg, exprs, internal=True)


class UnknownProgram(GenericException):
    """No bundled example program exists under the requested name."""

    def __init__(self, name):
        super().__init__("no program named '{}' (try --list)", name, diagnosis=False)
        self.name = name


class ErrorHandler:
    """Context manager that will silently suppress Python errors and raise custom SIMPLE errors/warnings."""
    ERROR = "red"
    WARNING = "magenta"

    def __init__(self, fatal=True):
        self.fatal = fatal
        self.traceback = {}

    def register_program(self, name):
        """Registers program name in traceback."""
        self.traceback[name] = (None, None)

    def register_step(self, name, display, step):
        """Registers the state displayed at step of program name. Called by Tracer before every step."""
        self.traceback[name] = (display, step)

    def remove_step(self, name):
        """Removes step from traceback given program name. Should be called after a successful run."""
        self.traceback[name] = (None, None)

    @staticmethod
    def diagnose(error, warning=False):
        """Returns offending part of error.expr highlighted and bolded."""
        color = ErrorHandler.WARNING if warning else ErrorHandler.ERROR

        diagnosis = "  " + error.expr[:error.start]

        end = max(error.end, 1)
        diagnosis += colored(error.expr[error.start:end], color, attrs=["bold"])
        diagnosis += error.expr[end:] + "\n"

        diagnosis += "  " + " " * error.start
        diagnosis += colored("^" + "~" * (end - error.start - 1), color, attrs=["bold"])

        return diagnosis

    def warn(self, *args, **kwargs):
        """Generates and prints runtime warning message based on args."""
        error = GenericException(*args, **kwargs)

        error_msg = ""
        for name, (__, step) in self.traceback.items():
            if step is not None:
                error_msg += colored(f"{name}:{step}: ", attrs=["bold"])
                break

        error_msg += colored("warning: ", ErrorHandler.WARNING, attrs=["bold"]) + error.msg
        print(error_msg)

        if not error.internal and error.expr and error.diagnosis:
            print(ErrorHandler.diagnose(error, warning=True))

    def throw(self, error):
        """Throws error using error and self.traceback. error must be a GenericException, and self.traceback must be a
        dict of program: (display, step) representing origination of error.
        """
        error_msg = ""
        for name, (display, step) in self.traceback.items():
            if display is not None:
                error_msg += f"  Program '{name}', step {step}:\n"
                error_msg += f"    {display}\n"

        if error_msg:
            error_msg = "Traceback:\n" + error_msg

        if error.internal:
            error_msg += colored("[internal] ", ErrorHandler.ERROR, attrs=["bold"])

        error_msg += colored("error: ", ErrorHandler.ERROR, attrs=["bold"]) + error.msg
        print(error_msg)

        if not error.internal and error.expr and error.diagnosis:
            print(ErrorHandler.diagnose(error))

        if self.fatal:
            sys.exit(1)
        self.traceback = {}  # if error occurred, reset traceback (no need if error is fatal)

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        do_exit = False
        if exc_type is KeyboardInterrupt:
            self.throw(GenericException("keyboard interrupt"))
        elif exc_type is SystemExit:
            do_exit = True
        elif exc_type is RecursionError:
            self.throw(GenericException("normal form might exist, but maximum recursion depth exceeded"))
        elif exc_type is not None and issubclass(exc_type, GenericException):
            self.throw(exc_val)
        elif exc_type is not None:
            self.throw(GenericException(f"unknown error: '{exc_type.__name__}: {exc_val}'", internal=True))
            do_exit = True

        return not do_exit

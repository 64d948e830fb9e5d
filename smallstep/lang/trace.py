"""Printing machine traces. A Tracer is handed to Machine as its observer."""

from termcolor import colored

from smallstep.semantics.reduction import display, reducible


class Tracer:
    """Prints every state a Machine passes through as "<node>, <environment>", bolding the final one. If given an
    ErrorHandler, every state is also registered with it so that errors point at the step they happened in.
    """

    def __init__(self, name, error_handler=None, quiet=False, start=0):
        self.name = name
        self.error_handler = error_handler
        self.quiet = quiet  # only print the final state
        self.step = start  # steps the machine took before it was traced
        self.lines = []

        if self.error_handler is not None:
            self.error_handler.register_program(name)

    def __call__(self, node, environment):
        line = f"{display(node)}, {environment.display()}"
        self.lines.append(line)

        if self.error_handler is not None:
            self.error_handler.register_step(self.name, line, self.step)

        if reducible(node):
            if not self.quiet:
                print(line)
        else:
            print(colored(line, attrs=["bold"]))
            if self.error_handler is not None:
                self.error_handler.remove_step(self.name)

        self.step += 1

import io
import unittest
from contextlib import redirect_stdout

from smallstep.lang.error import ErrorHandler
from smallstep.lang.shell import Shell
from smallstep.semantics.nodes import DoNothing, Number


class ShellTestCase(unittest.TestCase):

    def setUp(self):
        self.shell = Shell(ErrorHandler())

    def cmd(self, line):
        """Runs line in the shell and returns what it printed."""
        output = io.StringIO()
        with redirect_stdout(output):
            self.shell.onecmd(line)
        return output.getvalue()

    def test_never_fatal(self):
        self.assertFalse(self.shell.error_handler.fatal)
        self.assertIn("error: ", self.cmd("load nope"))
        self.assertIn("error: ", self.cmd("frobnicate"))

    def test_list(self):
        output = self.cmd("list")
        for name in ["arithmetic", "while", "diverge"]:
            self.assertIn(name, output)

    def test_load_and_step(self):
        self.assertIn("x + y, {x: 3, y: 6}", self.cmd("load variables"))
        self.assertIn("3 + y, {x: 3, y: 6}", self.cmd("step"))
        self.assertIn("9, {x: 3, y: 6}", self.cmd("step 2"))
        self.assertEqual(Number(9), self.shell.machine.node)

        self.assertIn("warning: ", self.cmd("step"))
        self.assertEqual(3, self.shell.machine.steps)

    def test_run_and_reset(self):
        self.cmd("load while")
        self.assertIn("literally_doing_nothing, {x: 8, y: 5}", self.cmd("run"))
        self.assertEqual(DoNothing(), self.shell.machine.node)
        self.assertIn("{x: 8, y: 5}", self.cmd("env"))

        self.assertIn("while (x < y)", self.cmd("reset"))
        self.assertEqual(0, self.shell.machine.steps)
        self.assertIn("while (x < y)", self.cmd("show"))

    def test_run_bounded(self):
        self.cmd("load diverge")
        output = self.cmd("run 50")
        self.assertIn("error: ", output)
        self.assertIn("did not reach normal form", output)
        self.assertEqual(50, self.shell.machine.steps)

    def test_run_after_step(self):
        self.cmd("load diverge")
        self.cmd("step 3")
        output = self.cmd("run 10")
        self.assertIn("Program 'diverge', step 13", output)
        self.assertEqual(13, self.shell.machine.steps)

    def test_no_program(self):
        for line in ["step", "run", "show", "env", "reset"]:
            self.assertIn("no program loaded", self.cmd(line), line)

    def test_bad_count(self):
        self.cmd("load arithmetic")
        self.assertIn("error: ", self.cmd("step many"))
        output = self.cmd("run -3")
        self.assertIn("is not a valid number of steps", output)
        self.assertNotIn("did not reach normal form", output)
        self.assertEqual(0, self.shell.machine.steps)

    def test_exit(self):
        self.assertTrue(self.shell.onecmd("exit"))
        with redirect_stdout(io.StringIO()):
            self.assertTrue(self.shell.onecmd("EOF"))


if __name__ == '__main__':
    unittest.main()

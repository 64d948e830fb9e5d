import io
import unittest
from contextlib import redirect_stdout

from smallstep.main import main


class MainTestCase(unittest.TestCase):

    def run_main(self, *argv):
        output = io.StringIO()
        with redirect_stdout(output):
            main(list(argv))
        return output.getvalue()

    def test_list(self):
        output = self.run_main("--list")
        self.assertIn("increment", output)
        self.assertIn("never terminates", output)

    def test_run(self):
        output = self.run_main("while")
        self.assertIn("while (x < y) { x = x * 2 }, {x: 1, y: 5}", output)
        self.assertIn("literally_doing_nothing, {x: 8, y: 5}", output)

    def test_quiet(self):
        output = self.run_main("--quiet", "arithmetic")
        self.assertNotIn("9 * -2", output)
        self.assertIn("-7, {}", output)

    def test_help(self):
        output = io.StringIO()
        with redirect_stdout(output):
            with self.assertRaises(SystemExit):
                main(["--help"])
        help_text = " ".join(output.getvalue().split())
        self.assertIn("prints its small-step trace, or opens the interactive shell.", help_text)

    def test_unknown_program(self):
        with self.assertRaises(SystemExit) as context:
            self.run_main("nope")
        self.assertEqual(1, context.exception.code)

    def test_step_limit(self):
        output = io.StringIO()
        with redirect_stdout(output):
            with self.assertRaises(SystemExit):
                main(["--quiet", "--max-steps", "100", "diverge"])
        self.assertIn("did not reach normal form within", output.getvalue())
        self.assertIn("Program 'diverge', step 100", output.getvalue())


if __name__ == '__main__':
    unittest.main()

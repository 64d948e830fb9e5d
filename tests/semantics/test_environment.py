import unittest

from smallstep.lang.error import TypeMismatch, UnboundVariable
from smallstep.semantics.environment import Environment
from smallstep.semantics.nodes import Add, Boolean, Number, Variable


class EnvironmentTestCase(unittest.TestCase):

    def test_init(self):
        should_raise = [{"x": Variable("y")}, {"x": Add(Number(1), Number(2))}, {"x": 3}, {3: Number(3)}]
        for case in should_raise:
            self.assertRaises(TypeMismatch, Environment, case)

        self.assertEqual({"x": Number(1), "y": Boolean(True)}, Environment({"x": Number(1)}, y=Boolean(True)))
        self.assertEqual({}, Environment())

    def test_lookup(self):
        environment = Environment(x=Number(3))
        self.assertEqual(Number(3), environment.lookup("x"))

        with self.assertRaises(UnboundVariable) as context:
            environment.lookup("y")
        self.assertEqual("y", context.exception.name)

    def test_with_binding(self):
        environment = Environment(x=Number(1), y=Number(5))

        added = environment.with_binding("z", Boolean(False))
        self.assertEqual({"x": Number(1), "y": Number(5), "z": Boolean(False)}, added)

        overwritten = environment.with_binding("x", Number(2))
        self.assertEqual({"x": Number(2), "y": Number(5)}, overwritten)

        # snapshots that were handed out stay valid
        self.assertEqual({"x": Number(1), "y": Number(5)}, environment)

        self.assertRaises(TypeMismatch, environment.with_binding, "x", Variable("y"))

    def test_read_only(self):
        environment = Environment(x=Number(1))
        with self.assertRaises(TypeError):
            environment["x"] = Number(2)

    def test_display(self):
        cases = [
            (Environment(), "{}"),
            (Environment(x=Number(1), y=Number(5)), "{x: 1, y: 5}"),
            (Environment(x=Boolean(True)), "{x: true}"),
        ]
        for case, result in cases:
            self.assertEqual(result, case.display())
            self.assertEqual(result, str(case))


if __name__ == '__main__':
    unittest.main()

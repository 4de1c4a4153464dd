import logging
import math

from jasic_ast import *
from errors import EvalError
from lexer import Lexer
from parser import Parser
from values import NumberValue, StringValue, FALSE, truth

logger = logging.getLogger(__name__)

class Interpreter:
    """
    Runs a parsed Jasic program. `pc` is the index of the next statement;
    `goto` and `if ... then` jump by overwriting it. Execution ends once the
    counter runs past the last statement.
    """
    def __init__(self, program, output=None):
        self.program = program
        self.statements = program.statements
        self.labels = program.labels
        self.variables = {}
        self.pc = 0
        self.output = output or print

    @property
    def running(self):
        return self.pc < len(self.statements)

    def _get_variable(self, name):
        return self.variables.get(name, FALSE)

    def _set_variable(self, name, value):
        self.variables[name] = value

    def _evaluate_expr(self, expr):
        if isinstance(expr, Literal):
            return expr.value
        elif isinstance(expr, Variable):
            return self._get_variable(expr.name)
        elif isinstance(expr, BinaryOp):
            # operator chains are left-deep, so walk the left spine iteratively
            rest = []
            while isinstance(expr, BinaryOp):
                rest.append((expr.op, expr.right))
                expr = expr.left
            value = self._evaluate_expr(expr)
            for op, right in reversed(rest):
                value = self._apply_operator(op, value, self._evaluate_expr(right))
            return value
        raise EvalError(f"Invalid expression type: {type(expr).__name__}")

    def _apply_operator(self, op, left, right):
        # the left operand decides between numeric and string semantics
        textual = isinstance(left, StringValue)

        if op == '=':
            if textual:
                return truth(left.to_text() == right.to_text())
            return truth(left.to_number() == right.to_number())
        if op == '+':
            if textual:
                return StringValue(left.to_text() + right.to_text())
            return NumberValue(left.to_number() + right.to_number())
        if op == '-':
            return NumberValue(left.to_number() - right.to_number())
        if op == '*':
            return NumberValue(left.to_number() * right.to_number())
        if op == '/':
            return NumberValue(self._divide(left.to_number(), right.to_number()))
        if op == '<':
            if textual:
                return truth(left.to_text() < right.to_text())
            return truth(left.to_number() < right.to_number())
        if op == '>':
            if textual:
                return truth(left.to_text() > right.to_text())
            return truth(left.to_number() > right.to_number())
        raise EvalError(f"Unknown operator: {op}")

    @staticmethod
    def _divide(dividend, divisor):
        # IEEE semantics: x/0 is a signed infinity, 0/0 is nan
        if divisor == 0:
            if dividend == 0 or math.isnan(dividend):
                return math.nan
            return math.copysign(math.inf, dividend) * math.copysign(1.0, divisor)
        return dividend / divisor

    def _jump(self, label):
        if label in self.labels:
            logger.debug("Jump from %d to '%s' (%d)", self.pc - 1, label, self.labels[label])
            self.pc = self.labels[label]

    def step(self):
        """Executes the statement at `pc` and reports whether the program is still running."""
        if not self.running:
            return False

        stmt = self.statements[self.pc]
        self.pc += 1

        if isinstance(stmt, AssignStatement):
            self._set_variable(stmt.name, self._evaluate_expr(stmt.expr))

        elif isinstance(stmt, PrintStatement):
            self.output(self._evaluate_expr(stmt.expr).to_text())

        elif isinstance(stmt, GotoStatement):
            self._jump(stmt.label)

        elif isinstance(stmt, IfThenStatement):
            # an unresolved label skips the condition entirely
            if stmt.label in self.labels and self._evaluate_expr(stmt.condition).to_number() != 0:
                self._jump(stmt.label)

        else:
            raise EvalError(f"Unknown statement at index {self.pc - 1}: {type(stmt).__name__}")

        return self.running

    def run(self):
        while self.pc < len(self.statements):
            self.step()
        return self

def parse(source):
    tokens = Lexer(source).tokenize()
    program = Parser(tokens).parse_program()
    logger.debug("Parsed %d statements, %d labels", len(program.statements), len(program.labels))
    return program

def interpret(source, output=None):
    """Lexes, parses and runs `source`, sending each printed line to `output`."""
    return Interpreter(parse(source), output).run()

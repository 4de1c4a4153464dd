import pytest

from errors import ParseError
from interpreter import parse
from jasic_ast import *
from parser import MAX_NESTING
from values import NumberValue, StringValue

def num(n):
    return Literal(NumberValue(n))

def test_operators_are_flat_and_left_associative():
    program = parse("x = 1 + 2 * 3\n")
    assert program.statements == [
        AssignStatement('x', BinaryOp(BinaryOp(num(1), '+', num(2)), '*', num(3))),
    ]

def test_parentheses_group():
    program = parse("print 1 + (2 * 3)\n")
    assert program.statements == [
        PrintStatement(BinaryOp(num(1), '+', BinaryOp(num(2), '*', num(3)))),
    ]

def test_equals_inside_expression_is_an_operator():
    program = parse("if a = 1 then done\n")
    assert program.statements == [
        IfThenStatement(BinaryOp(Variable('a'), '=', num(1)), 'done'),
    ]

def test_all_statement_kinds():
    program = parse('name = "bob"\nprint name\ngoto top\nif x < 3 then top\n')
    assert program.statements == [
        AssignStatement('name', Literal(StringValue('bob'))),
        PrintStatement(Variable('name')),
        GotoStatement('top'),
        IfThenStatement(BinaryOp(Variable('x'), '<', num(3)), 'top'),
    ]

def test_labels_point_at_following_statement():
    program = parse(":a\nprint 1\n:b\n:c\nprint 2\n:end\n")
    assert len(program.statements) == 2
    assert program.labels == {'a': 0, 'b': 1, 'c': 1, 'end': 2}

def test_duplicate_label_last_definition_wins():
    program = parse(":a\nprint 1\n:a\nprint 2\n")
    assert program.labels == {'a': 1}

def test_blank_lines_and_comments_are_ignored():
    program = parse("\n\n' nothing here\n\nprint 1\n\n")
    assert program.statements == [PrintStatement(num(1))]

def test_keyword_can_be_assigned_as_variable():
    program = parse("print = 3\n")
    assert program.statements == [AssignStatement('print', num(3))]

def test_keywords_are_case_sensitive():
    with pytest.raises(ParseError):
        parse("PRINT 1\n")

def test_goto_target_is_not_checked():
    program = parse("goto nowhere\n")
    assert program.statements == [GotoStatement('nowhere')]
    assert program.labels == {}

@pytest.mark.parametrize("source", [
    "print (1 + 2\n",
    "print 1 + )\n",
    "print\n",
    "if x goto y\n",
    "if x then\n",
    "goto 10\n",
    "x\n",
    ")\n",
])
def test_malformed_programs_raise(source):
    with pytest.raises(ParseError):
        parse(source)

def test_parse_error_reports_position():
    with pytest.raises(ParseError) as excinfo:
        parse("print 1\nprint (2\n")
    assert excinfo.value.line == 2
    assert str(excinfo.value).startswith("Line 2:")

def test_label_starting_with_digit_is_rejected():
    with pytest.raises(ParseError):
        parse(":10\nprint 1\n")

def test_long_operator_chain():
    program = parse("x = " + " + ".join(["1"] * 1500) + "\n")
    assert len(program.statements) == 1

def test_nesting_limit():
    assert parse("print " + "(" * MAX_NESTING + "1" + ")" * MAX_NESTING + "\n").statements == [
        PrintStatement(num(1)),
    ]
    with pytest.raises(ParseError) as excinfo:
        parse("print " + "(" * 600 + "1" + ")" * 600 + "\n")
    assert "nested too deeply" in str(excinfo.value)

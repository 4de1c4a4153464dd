from dataclasses import dataclass, field
from typing import Dict, List, Union

from values import NumberValue, StringValue

@dataclass(frozen=True)
class Variable:
    name: str

@dataclass(frozen=True)
class Literal:
    value: Union[NumberValue, StringValue]

@dataclass(frozen=True)
class BinaryOp:
    left: 'Expression'
    op: str
    right: 'Expression'

Expression = Union[Variable, Literal, BinaryOp]

@dataclass(frozen=True)
class AssignStatement:
    name: str
    expr: Expression

@dataclass(frozen=True)
class PrintStatement:
    expr: Expression

@dataclass(frozen=True)
class GotoStatement:
    label: str

@dataclass(frozen=True)
class IfThenStatement:
    condition: Expression
    label: str

Statement = Union[AssignStatement, PrintStatement, GotoStatement, IfThenStatement]

@dataclass
class Program:
    statements: List[Statement] = field(default_factory=list)
    labels: Dict[str, int] = field(default_factory=dict)

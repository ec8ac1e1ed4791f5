from .assignment import Array, Assignment, AssignmentValue, Literal
from .comment import Comment
from .function import Function
from .source_code import PkgbuildSource
from .token import Token
from .value import DoubleQuoted, SingleQuoted, Unquoted, Value

__all__ = [
    "Array",
    "Assignment",
    "AssignmentValue",
    "Comment",
    "DoubleQuoted",
    "Function",
    "Literal",
    "PkgbuildSource",
    "SingleQuoted",
    "Token",
    "Unquoted",
    "Value",
]

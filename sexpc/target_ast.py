"""
Defines the data structures for the target AST built by the transformer and
consumed by the code generator.
"""

from typing import Annotated, List, Literal, Union

from pydantic import BaseModel, Field


class Identifier(BaseModel):
    type: Literal["Identifier"] = "Identifier"
    name: str


class NumberLiteral(BaseModel):
    type: Literal["NumberLiteral"] = "NumberLiteral"
    value: str


class StringLiteral(BaseModel):
    type: Literal["StringLiteral"] = "StringLiteral"
    value: str


class CallExpression(BaseModel):
    type: Literal["CallExpression"] = "CallExpression"
    callee: Identifier
    arguments: List["Expression"] = []


Expression = Annotated[Union[NumberLiteral, StringLiteral, CallExpression], Field(discriminator="type")]
CallExpression.model_rebuild()


class ExpressionStatement(BaseModel):
    """Wraps a call that sits directly in the program body."""

    type: Literal["ExpressionStatement"] = "ExpressionStatement"
    expression: Expression


Statement = Annotated[
    Union[ExpressionStatement, NumberLiteral, StringLiteral],
    Field(discriminator="type"),
]


class Program(BaseModel):
    type: Literal["Program"] = "Program"
    body: List[Statement] = []


"""
Defines the data structures for the source Abstract Syntax Tree (AST)
produced by the parser stage.

Each node is a pydantic model tagged with a literal `type` field naming its kind.
"""

from typing import Annotated, List, Literal, Union

from pydantic import BaseModel, Field


class NumberLiteral(BaseModel):
    type: Literal["NumberLiteral"] = "NumberLiteral"
    value: str


class StringLiteral(BaseModel):
    type: Literal["StringLiteral"] = "StringLiteral"
    value: str


class CallExpression(BaseModel):
    type: Literal["CallExpression"] = "CallExpression"
    name: str
    params: List["Node"] = []


# Any node that may appear inside a Program body or a call's params
Node = Annotated[Union[NumberLiteral, StringLiteral, CallExpression], Field(discriminator="type")]
CallExpression.model_rebuild()


class Program(BaseModel):
    """The root of the source AST: one per compilation."""

    type: Literal["Program"] = "Program"
    body: List[Node] = []


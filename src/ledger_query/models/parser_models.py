"""
Pydantic models for query tokenization.
Separated from lexer logic for better organization.
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict


class TermShape(Enum):
    """How a query term was written."""

    PREFIXED_QUOTED = "PREFIXED_QUOTED"  # desc:'a b', not:'a b'
    QUOTED = "QUOTED"  # 'a b' or "a b"
    PLAIN = "PLAIN"  # a, acct:a, 'b


class Token(BaseModel):
    """One query term with its shape and position in the query string."""

    shape: TermShape
    value: str
    position: int

    model_config = ConfigDict(
        frozen=True,
        json_schema_extra={
            "examples": [
                {"shape": "PREFIXED_QUOTED", "value": "desc:b b", "position": 9},
                {"shape": "PLAIN", "value": "inacct:a", "position": 0},
            ]
        },
    )

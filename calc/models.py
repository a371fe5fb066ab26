"""
Result models for the calculator.
"""

from typing import List

from pydantic import BaseModel, Field


class Calculation(BaseModel):
    """The three outputs produced for one successfully parsed line"""
    expression: str = Field(..., description="Input line as read")
    infix: str = Field(..., description="Fully parenthesized infix rendering")
    tree: List[str] = Field(default_factory=list, description="Indented tree dump")
    value: float = Field(..., description="Numeric result")
    result: str = Field(..., description="Formatted numeric result")

    def lines(self) -> List[str]:
        """Output block as printed by the read loop"""
        return [
            f"Infix notation: {self.infix}",
            "Tree structure:",
            *self.tree,
            f"Result: {self.result}",
        ]

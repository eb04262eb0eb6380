from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict

Operator = Literal["+", "-", "*"]


class CaptchaChallenge(BaseModel):
    """Arithmetic liveness challenge shown before registration or login."""

    model_config = ConfigDict(frozen=True)

    operand1: int
    operand2: int
    operator: Operator
    answer: int

    @property
    def question(self) -> str:
        return f"{self.operand1} {self.operator} {self.operand2}"

    def verify(self, answer: int | str) -> bool:
        """Check a submitted answer; non-numeric input never matches."""
        try:
            return int(str(answer).strip()) == self.answer
        except ValueError:
            return False

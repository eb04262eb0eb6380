from __future__ import annotations

import operator
import random

from airdrop_hub.core.config import Settings, get_settings
from airdrop_hub.schemas import CaptchaChallenge

_OPERATIONS = {
    "+": operator.add,
    "-": operator.sub,
    "*": operator.mul,
}


class CaptchaGenerator:
    """Produces arithmetic challenges; verification is left to the caller."""

    def __init__(self, settings: Settings | None = None, rng: random.Random | None = None) -> None:
        settings = settings or get_settings()
        self.low = settings.captcha_min_operand
        self.high = settings.captcha_max_operand
        self._rng = rng or random.Random()

    def generate(self) -> CaptchaChallenge:
        operand1 = self._rng.randint(self.low, self.high)
        operand2 = self._rng.randint(self.low, self.high)
        symbol = self._rng.choice(tuple(_OPERATIONS))
        # Subtraction may go negative; the answer is never clamped
        answer = _OPERATIONS[symbol](operand1, operand2)
        return CaptchaChallenge(operand1=operand1, operand2=operand2, operator=symbol, answer=answer)

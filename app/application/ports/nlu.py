from abc import ABC, abstractmethod

from app.domain.entities.intent import NLUGuess


class NLUPort(ABC):
    @abstractmethod
    def analyze(self, text: str) -> NLUGuess:
        """
        Read intent and reservation details out of a user message.

        Requirements:
        - Never raises; provider or parsing failures return NLUGuess.unknown()
        - Fields that cannot be inferred confidently are None
        - Values are advisory; callers validate them before use

        Args:
            text: Raw user message

        Returns:
            NLUGuess with intent, date (YYYY-MM-DD), time (HH:MM), guests, name, notes
        """
        raise NotImplementedError

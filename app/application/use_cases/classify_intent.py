from __future__ import annotations

import logging

from app.application.ports.nlu import NLUPort
from app.application.utils.message_rules import detect_action_keyword
from app.domain.entities.intent import ChatAction, IntentClassification, NLUGuess, NLUIntent

NLU_INTENT_TO_ACTION = {
    NLUIntent.NEW_RESERVATION: ChatAction.NEW,
    NLUIntent.MODIFY_RESERVATION: ChatAction.MODIFY,
    NLUIntent.CANCEL_RESERVATION: ChatAction.CANCEL,
    NLUIntent.CONFIRM_RESERVATION: ChatAction.CONFIRM,
    NLUIntent.SMALL_TALK: ChatAction.SMALL_TALK,
    NLUIntent.UNKNOWN: ChatAction.UNKNOWN,
}


class ClassifyIntentUseCase:
    """Keyword matching first; the NLU guess decides only when no keyword matched."""

    def __init__(self, nlu: NLUPort | None) -> None:
        self._nlu = nlu
        self._logger = logging.getLogger(__name__)

    def execute(self, text: str) -> IntentClassification:
        guess = self._nlu.analyze(text) if self._nlu else NLUGuess.unknown(notes="NLU disabled")

        keyword_action = detect_action_keyword(text)
        if keyword_action is not None:
            action, source = keyword_action, "keyword"
        else:
            action = NLU_INTENT_TO_ACTION.get(guess.intent, ChatAction.UNKNOWN)
            source = "nlu" if action != ChatAction.UNKNOWN else "none"

        self._logger.debug("Intent classified", extra={"intent": action.value, "reason": source})
        return IntentClassification(action=action, source=source, guess=guess)

from __future__ import annotations

import logging
from dataclasses import replace
from datetime import date
from typing import Any, Callable

from app.application.ports.conversation_store import ConversationStorePort
from app.application.ports.reservation_store import ReservationStorePort
from app.application.use_cases import reply_composer as replies
from app.application.use_cases.classify_intent import ClassifyIntentUseCase
from app.application.utils.message_rules import is_affirmative, is_negative
from app.application.utils.validation import is_valid_date, is_valid_name, normalize_time, parse_guests
from app.domain.entities.conversation_state import (
    CancelCollectingId,
    ChoosingAction,
    ConfirmCollectingId,
    ConversationState,
    Idle,
    LastAction,
    ModifiableField,
    ModifyCollectingField,
    ModifyCollectingId,
    ModifyCollectingValue,
    NewCollecting,
    NewConfirming,
)
from app.domain.entities.intent import ChatAction, NLUGuess
from app.domain.entities.reservation import ReservationDraft

Turn = tuple[ConversationState, str]


class HandleChatMessageUseCase:
    """
    Drives one conversation turn: read the stored step, apply the message, store the next step.

    Steps and their transitions:
        idle -> choosingAction
        choosingAction -> new_collecting -> new_confirming -> choosingAction
        choosingAction -> modify_collectingId -> modify_collectingField -> modify_collectingValue -> choosingAction
        choosingAction -> cancel_collectingId -> choosingAction
        choosingAction -> confirm_collectingId -> choosingAction
    """

    def __init__(
        self,
        conversations: ConversationStorePort,
        reservations: ReservationStorePort,
        classify_intent: ClassifyIntentUseCase,
        today: Callable[[], date],
        restaurant_name: str,
    ) -> None:
        self._conversations = conversations
        self._reservations = reservations
        self._classify_intent = classify_intent
        self._today = today
        self._restaurant_name = restaurant_name
        self._logger = logging.getLogger(__name__)

    def handle(self, conversation_id: str, text: str) -> str:
        state = self._conversations.get_state(conversation_id)
        next_state, reply = self._dispatch(state, text)
        self._conversations.set_state(conversation_id, next_state)
        self._logger.info(
            "Chat turn handled",
            extra={"conversation_id": conversation_id, "step": f"{state.step.tag}->{next_state.step.tag}"},
        )
        return reply

    def _dispatch(self, state: ConversationState, text: str) -> Turn:
        step = state.step
        if isinstance(step, Idle):
            return replace(state, step=ChoosingAction()), replies.welcome(self._restaurant_name)
        if isinstance(step, ChoosingAction):
            return self._choose_action(state, text)
        if isinstance(step, NewCollecting):
            return self._collect_new_field(state, step, text)
        if isinstance(step, NewConfirming):
            return self._confirm_new(state, step, text)
        if isinstance(step, ModifyCollectingId):
            return self._collect_modify_id(state, text)
        if isinstance(step, ModifyCollectingField):
            return self._collect_modify_field(state, step, text)
        if isinstance(step, ModifyCollectingValue):
            return self._collect_modify_value(state, step, text)
        if isinstance(step, CancelCollectingId):
            return self._collect_cancel_id(state, text)
        if isinstance(step, ConfirmCollectingId):
            return self._collect_confirm_id(state, text)

        self._logger.warning("Unexpected conversation step, resetting", extra={"step": repr(step)})
        return _reset(state), replies.restart()

    def _choose_action(self, state: ConversationState, text: str) -> Turn:
        classification = self._classify_intent.execute(text)
        action = classification.action
        self._logger.info("Action chosen", extra={"intent": action.value, "reason": classification.source})

        if action == ChatAction.NEW:
            draft = self._prefill_draft(classification.guess)
            missing = draft.missing_field()
            if missing is None:
                next_state = replace(state, step=NewConfirming(draft=draft), last_action=LastAction.NEW)
                return next_state, replies.ask_confirmation(draft)
            next_state = replace(state, step=NewCollecting(draft=draft), last_action=LastAction.NEW)
            return next_state, replies.start_new(missing)

        if action == ChatAction.MODIFY:
            next_state = replace(state, step=ModifyCollectingId(), last_action=LastAction.MODIFY)
            return next_state, replies.ask_reservation_id("modify it")

        if action == ChatAction.CANCEL:
            next_state = replace(state, step=CancelCollectingId(), last_action=LastAction.CANCEL)
            return next_state, replies.ask_reservation_id("cancel it")

        if action == ChatAction.CONFIRM:
            next_state = replace(state, step=ConfirmCollectingId(), last_action=LastAction.CONFIRM)
            return next_state, replies.ask_reservation_id("see the details", state.last_reservation_id)

        if action == ChatAction.SMALL_TALK:
            return state, replies.small_talk()

        return state, replies.not_understood()

    def _prefill_draft(self, guess: NLUGuess) -> ReservationDraft:
        """Copy NLU-extracted fields that pass the same checks as typed input; drop the rest."""
        accepted = {}
        for field in ("date", "time", "guests", "name"):
            value = self._accept_field(field, getattr(guess, field))
            if value is not None:
                accepted[field] = value
        return ReservationDraft(**accepted)

    def _collect_new_field(self, state: ConversationState, step: NewCollecting, text: str) -> Turn:
        draft = step.draft
        field = draft.missing_field()
        if field is not None:
            value = self._accept_field(field, text)
            if value is None:
                return state, replies.INVALID_FIELD_PROMPTS[field]
            draft = replace(draft, **{field: value})

        next_missing = draft.missing_field()
        if next_missing is None:
            next_state = replace(state, step=NewConfirming(draft=draft), last_action=LastAction.NEW)
            return next_state, replies.ask_confirmation(draft)
        return replace(state, step=NewCollecting(draft=draft)), replies.FIELD_PROMPTS[next_missing]

    def _confirm_new(self, state: ConversationState, step: NewConfirming, text: str) -> Turn:
        if is_affirmative(text):
            draft = step.draft
            missing = draft.missing_field()
            if missing is not None:
                next_state = replace(state, step=NewCollecting(draft=draft))
                return next_state, replies.details_missing(missing)
            reservation = self._reservations.create(
                name=draft.name,
                date=draft.date,
                time=draft.time,
                guests=draft.guests,
            )
            return _reset(state, last_reservation_id=reservation.id), replies.reservation_created(reservation)

        if is_negative(text):
            return _reset(state), replies.reservation_discarded()

        return state, replies.confirm_yes_no()

    def _collect_modify_id(self, state: ConversationState, text: str) -> Turn:
        reservation_id = text.strip()
        reservation = self._reservations.get(reservation_id)
        if reservation is None:
            return state, replies.reservation_not_found()
        if reservation.is_cancelled:
            return state, replies.reservation_already_cancelled(reservation_id)
        return replace(state, step=ModifyCollectingField(reservation_id=reservation_id)), replies.ask_field_to_modify()

    def _collect_modify_field(self, state: ConversationState, step: ModifyCollectingField, text: str) -> Turn:
        field = ModifiableField.parse(text)
        if field is None:
            return state, replies.invalid_field_to_modify()
        next_step = ModifyCollectingValue(reservation_id=step.reservation_id, field_to_modify=field)
        return replace(state, step=next_step), replies.ask_new_value(field.value)

    def _collect_modify_value(self, state: ConversationState, step: ModifyCollectingValue, text: str) -> Turn:
        if not step.reservation_id or step.field_to_modify is None:
            self._logger.warning("Modification flow missing id or field", extra={"step": step.tag})
            return _reset(state), replies.modification_flow_broken()

        field = step.field_to_modify.value
        value = self._accept_field(field, text)
        if value is None:
            return state, replies.INVALID_FIELD_PROMPTS[field]

        updated = self._reservations.update(step.reservation_id, **{field: value})
        if updated is None:
            return _reset(state), replies.modification_target_missing()
        return _reset(state, last_reservation_id=updated.id), replies.reservation_updated(updated)

    def _collect_cancel_id(self, state: ConversationState, text: str) -> Turn:
        cancelled = self._reservations.cancel(text.strip())
        if cancelled is None:
            return state, replies.reservation_not_found()
        return _reset(state), replies.reservation_cancelled(cancelled)

    def _collect_confirm_id(self, state: ConversationState, text: str) -> Turn:
        reservation = self._reservations.get(text.strip())
        if reservation is None:
            return state, replies.reservation_not_found()
        return _reset(state), replies.reservation_details(reservation)

    def _accept_field(self, field: str, raw: Any) -> Any:
        """Validated, normalized value for a reservation field, or None if it is not acceptable."""
        if raw is None:
            return None
        if field == "guests":
            return parse_guests(raw)
        if not isinstance(raw, str):
            return None
        if field == "date":
            value = raw.strip()
            return value if is_valid_date(value, today=self._today()) else None
        if field == "time":
            return normalize_time(raw)
        if field == "name":
            return raw.strip() if is_valid_name(raw) else None
        return None


def _reset(state: ConversationState, last_reservation_id: str | None = None) -> ConversationState:
    """Back to the action menu with an empty draft; keeps the last reservation id unless a new one is given."""
    return ConversationState(
        step=ChoosingAction(),
        last_action=None,
        last_reservation_id=last_reservation_id or state.last_reservation_id,
    )

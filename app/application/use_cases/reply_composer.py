from __future__ import annotations

from app.domain.entities.reservation import Reservation, ReservationDraft

MENU_OPTIONS = (
    "1) New reservation\n"
    "2) Modify reservation\n"
    "3) Cancel reservation\n"
    "4) Confirm (see details)"
)

FIELD_PROMPTS = {
    "date": "What date would you like? (YYYY-MM-DD)",
    "time": "What time would you like? (HH:MM, 24h format)",
    "guests": "How many guests?",
    "name": "Under what name should I make the reservation?",
}

INVALID_FIELD_PROMPTS = {
    "date": "The date is invalid. Please enter a date from today onwards as YYYY-MM-DD:",
    "time": "The time format is invalid. Please enter time as HH:MM in 24h format:",
    "guests": "Guests must be a number between 1 and 20. Please enter the number of guests:",
    "name": "The name can't be empty. Please enter the name for the reservation:",
}

NEXT_STEP = "What would you like to do next?"
ACTION_HINT = "Please type: new, modify, cancel, or confirm."


def welcome(restaurant_name: str) -> str:
    return (
        f"Hello! I can help you with reservations at {restaurant_name}.\n"
        "What would you like to do?\n"
        f"{MENU_OPTIONS}\n"
        "Please type something like 'new reservation', 'modify', 'cancel', or 'confirm'."
    )


def restart() -> str:
    return f"Let's start over.\nWhat would you like to do?\n{MENU_OPTIONS}"


def not_understood() -> str:
    return f"I didn't quite get that. {ACTION_HINT}"


def small_talk() -> str:
    return f"Happy to help! {ACTION_HINT}"


def draft_summary(draft: ReservationDraft) -> str:
    return f"- Name: {draft.name}\n- Date: {draft.date}\n- Time: {draft.time}\n- Guests: {draft.guests}"


def reservation_summary(reservation: Reservation) -> str:
    return (
        f"Reservation ID: {reservation.id}\n"
        f"- Name: {reservation.name}\n"
        f"- Date: {reservation.date}\n"
        f"- Time: {reservation.time}\n"
        f"- Guests: {reservation.guests}\n"
        f"- Status: {reservation.status.value}"
    )


def start_new(first_missing: str) -> str:
    return f"Great! Let's make a new reservation.\n{FIELD_PROMPTS[first_missing]}"


def ask_confirmation(draft: ReservationDraft) -> str:
    return f"Please confirm your reservation:\n{draft_summary(draft)}\nReply 'yes' to confirm or 'no' to cancel."


def confirm_yes_no() -> str:
    return "Please reply with 'yes' or 'no'."


def reservation_created(reservation: Reservation) -> str:
    return f"Your reservation is confirmed!\n{reservation_summary(reservation)}\n\n{NEXT_STEP}"


def reservation_discarded() -> str:
    return "Okay, the reservation was not created. What would you like to do instead (new / modify / cancel)?"


def ask_reservation_id(purpose: str, last_reservation_id: str | None = None) -> str:
    text = f"Please enter your reservation ID to {purpose}:"
    if last_reservation_id:
        text += f" (your last reservation was {last_reservation_id})"
    return text


def reservation_not_found() -> str:
    return "I couldn't find a reservation with that ID. Please check and enter the correct reservation ID:"


def reservation_already_cancelled(reservation_id: str) -> str:
    return (
        f"Reservation {reservation_id} has already been cancelled and can't be modified. "
        "Please enter a different reservation ID:"
    )


def ask_field_to_modify() -> str:
    return "Found your reservation.\nWhat would you like to change? (date / time / guests / name)"


def invalid_field_to_modify() -> str:
    return "Please type which field you want to change: date, time, guests, or name."


def ask_new_value(field: str) -> str:
    return f"What is the new {field}?"


def modification_flow_broken() -> str:
    return (
        "Something went wrong with the modification flow. Let's start again. "
        "What would you like to do (new / modify / cancel)?"
    )


def modification_target_missing() -> str:
    return "I couldn't find that reservation anymore. Let's start over. What would you like to do?"


def reservation_updated(reservation: Reservation) -> str:
    return f"Your reservation has been updated.\n{reservation_summary(reservation)}\n\n{NEXT_STEP}"


def reservation_cancelled(reservation: Reservation) -> str:
    return f"Your reservation has been cancelled.\nReservation ID: {reservation.id}\n\n{NEXT_STEP}"


def reservation_details(reservation: Reservation) -> str:
    return f"Here are your reservation details:\n{reservation_summary(reservation)}\n\n{NEXT_STEP}"


def details_missing(first_missing: str) -> str:
    return f"Some details are missing. Let's collect them again.\n{FIELD_PROMPTS[first_missing]}"

#!/usr/bin/env python3
"""
Interactive local chat harness (no HTTP).

Usage:
  NLU_PROVIDER=mock python3 scripts/chat_local.py

What it does:
- Keeps a stable conversation id for the session
- Sends your typed messages through the same HandleChatMessageUseCase the API uses
- Prints the reply and, on request, the stored conversation step and reservations
"""

from __future__ import annotations

import os
import sys
import time
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from app.core.config import settings
from app.wiring.dependencies import build_container


def _print_header(conversation_id: str) -> None:
    print("\nLocal Chat Harness")
    print("-" * 60)
    print(f"conversation_id: {conversation_id}")
    print("Type your message and press Enter.")
    print("Commands: /new (new conversation), /state, /list, /quit, /help")
    print("-" * 60)


def main() -> None:
    conversation_id = os.getenv("CHAT_CONVERSATION_ID", "local_user_1")
    try:
        container = build_container(settings)
    except ValueError as e:
        print(f"Cannot start: {e}")
        print("Set OPENAI_API_KEY, or run with NLU_PROVIDER=mock.")
        sys.exit(1)

    _print_header(conversation_id)

    while True:
        try:
            user_text = input("\n> ").strip()
        except (EOFError, KeyboardInterrupt):
            print("\nBye!")
            return

        if not user_text:
            continue

        cmd = user_text.lower()
        if cmd in ("/quit", "/exit"):
            print("Bye!")
            return
        if cmd == "/help":
            print("Commands:")
            print("  /new   -> start a new conversation id (greets again)")
            print("  /state -> show the stored conversation state")
            print("  /list  -> show all reservations")
            print("  /quit  -> exit")
            continue
        if cmd == "/new":
            conversation_id = f"local_user_{int(time.time())}"
            print(f"New conversation_id: {conversation_id}")
            continue
        if cmd == "/state":
            state = container.conversation_store.get_state(conversation_id)
            print(f"step={state.step.tag} last_action={state.last_action} last_reservation_id={state.last_reservation_id}")
            print(f"draft={state.draft}")
            continue
        if cmd == "/list":
            reservations = container.reservation_store.list()
            if not reservations:
                print("(no reservations)")
            for r in reservations:
                print(f"{r.id} | {r.name} | {r.date} {r.time} | guests={r.guests} | {r.status.value}")
            continue

        reply = container.chat.handle(conversation_id, user_text)
        print(f"\n{reply}")


if __name__ == "__main__":
    main()

from __future__ import annotations

import json
import logging
from datetime import date
from typing import Any, Callable

from openai import OpenAI

from app.application.exceptions import NLUContractError, NLUUpstreamError
from app.application.ports.nlu import NLUPort
from app.domain.entities.intent import NLUGuess, NLUIntent
from app.infrastructure.nlu.prompts import build_analyze_prompt


class OpenAINLU(NLUPort):
    """
    OpenAI-backed adapter implementing NLUPort.

    Contract guarantees:
    - analyze never raises
    - NLUUpstreamError (provider failures) and NLUContractError (invalid JSON or shape)
      are raised internally and turned into an unknown-intent guess
    """

    def __init__(
        self,
        api_key: str,
        model: str,
        temperature: float,
        timeout_seconds: float,
        today: Callable[[], date],
        restaurant_name: str,
        client: Any | None = None,
    ) -> None:
        self.client = client or OpenAI(api_key=api_key, timeout=timeout_seconds, max_retries=0)
        self._model = model
        self._temperature = temperature
        self._today = today
        self._restaurant_name = restaurant_name
        self._logger = logging.getLogger(__name__)

    def analyze(self, text: str) -> NLUGuess:
        try:
            prompt = build_analyze_prompt(text, self._today(), self._restaurant_name)
            raw = self._call_text(prompt)
            return _to_guess(_parse_json(raw))
        except (NLUUpstreamError, NLUContractError) as e:
            self._logger.warning("NLU fallback to unknown intent", extra={"reason": type(e).__name__, "error": str(e)})
            return NLUGuess.unknown(notes=f"NLU unavailable: {e}")
        except Exception as e:
            self._logger.exception("Unexpected NLU failure", extra={"error": str(e)})
            return NLUGuess.unknown(notes="NLU unavailable")

    def _call_text(self, prompt: str) -> str:
        try:
            resp = self.client.chat.completions.create(
                model=self._model,
                messages=[
                    {"role": "system", "content": "Return only valid JSON. Do not include markdown or extra text."},
                    {"role": "user", "content": prompt},
                ],
                temperature=self._temperature,
                max_tokens=300,
                response_format={"type": "json_object"},
            )
        except Exception as e:
            raise NLUUpstreamError(f"OpenAI API error: {e}") from e

        content = (resp.choices[0].message.content or "").strip() if resp.choices else ""
        if not content:
            raise NLUContractError("NLU returned empty response text.")

        return content


def _parse_json(text: str) -> dict[str, Any]:
    try:
        data = json.loads(text)
    except Exception:
        snippet = text[:200].replace("\n", " ")
        raise NLUContractError(f"Analyze: invalid JSON. Snippet: {snippet!r}")
    if not isinstance(data, dict):
        raise NLUContractError("Analyze: expected a JSON object.")
    return data


def _to_guess(data: dict[str, Any]) -> NLUGuess:
    return NLUGuess(
        intent=NLUIntent.coerce(data.get("intent")),
        date=_optional_str(data.get("date")),
        time=_optional_str(data.get("time")),
        guests=_optional_int(data.get("guests")),
        name=_optional_str(data.get("name")),
        notes=str(data.get("notes") or "No notes provided"),
    )


def _optional_str(value: Any) -> str | None:
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def _optional_int(value: Any) -> int | None:
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value) if value.is_integer() else None
    try:
        return int(str(value).strip())
    except ValueError:
        return None

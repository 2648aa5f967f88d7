"""Voice-capture session state around an external speech engine.

Responsibilities:
- Track listening status, transcripts, errors, and the current lookup result.
- Run exactly one lookup per completed utterance.
- Remap engine error codes into locale-specific user messages.

The speech engine itself is not part of this module: callers forward its
start/partial/final/error/end events to the matching `on_*` methods.
"""

from __future__ import annotations

from dataclasses import replace
from typing import Sequence

from .matcher import ProductMatcher
from .models.datatypes import SessionState
from .telemetry.logger import LookupLogger


_NO_MATCH_ERROR_CODE = "7"
_NO_MATCH_ERROR_TEXT = "No match"


class VoiceSession:
    """Event-driven holder of immutable `SessionState` snapshots."""

    def __init__(
        self,
        matcher: ProductMatcher,
        lookup_logger: LookupLogger | None = None,
    ) -> None:
        """Initialize the session in its idle state."""

        self.matcher = matcher
        self.messages = matcher.profile.messages
        self._logger = lookup_logger
        self.state = SessionState()

    @property
    def speech_locale(self) -> str:
        """Return the locale tag to pass to the speech engine's start call."""

        return self.matcher.profile.speech_locale

    def _update(self, **changes: object) -> SessionState:
        self.state = replace(self.state, **changes)
        return self.state

    def begin_listening(self) -> SessionState:
        """Reset the previous utterance and mark the session as listening."""

        self.state = SessionState(is_listening=True)
        return self.state

    def permission_denied(self) -> SessionState:
        """Record a refused microphone permission."""

        return self._update(is_listening=False, error=self.messages.permission_denied)

    def on_speech_start(self) -> SessionState:
        return self._update(is_listening=True, error="")

    def on_speech_end(self) -> SessionState:
        return self._update(is_listening=False)

    def stop(self) -> SessionState:
        """Stop listening without discarding the current result."""

        return self._update(is_listening=False)

    def reset(self) -> SessionState:
        self.state = SessionState()
        return self.state

    def on_partial_results(self, values: Sequence[str] | None) -> SessionState:
        """Store the best partial transcript; partials are never looked up."""

        return self._update(partial_transcript=_best_value(values))

    def on_speech_results(self, values: Sequence[str] | None) -> SessionState:
        """Look up the best final transcript and store it as the current result."""

        transcript = _best_value(values)
        result = self.matcher.find_matches(transcript)
        if self._logger is not None:
            self._logger.log_lookup(
                key=self.matcher.normalizer.normalize(transcript),
                tier=result.tier if result is not None else None,
                match_count=len(result) if result is not None else 0,
            )
        return self._update(
            is_listening=False,
            partial_transcript="",
            final_transcript=transcript,
            result=result,
            lookup_attempted=True,
        )

    def on_speech_error(self, code: str | int | None, message: str | None = None) -> SessionState:
        """Record a speech-engine error as a user-facing message."""

        code_text = None if code is None else str(code)
        if self._logger is not None:
            self._logger.log_speech_error(code_text)
        return self._update(
            is_listening=False,
            error=self.error_message(code_text, message),
        )

    def error_message(self, code: str | None, message: str | None) -> str:
        """Map an engine error code/message to the locale's user message."""

        text = (message or "").strip()
        if code == _NO_MATCH_ERROR_CODE or _NO_MATCH_ERROR_CODE in text:
            return self.messages.no_speech
        if _NO_MATCH_ERROR_TEXT in text:
            return self.messages.no_speech
        if text:
            return text
        return self.messages.unknown_error

    def announcement(self) -> str | None:
        """Return accessibility text for the current result, if a lookup ran."""

        if not self.state.lookup_attempted:
            return None
        result = self.state.result
        if result is None:
            return self.messages.not_found
        return self.messages.separator.join(
            self.messages.found_template.format(name=record.name, id=record.id)
            for record in result.records
        )


def _best_value(values: Sequence[str] | None) -> str:
    """Return the first engine alternative, or an empty transcript."""

    if not values:
        return ""
    return values[0] or ""

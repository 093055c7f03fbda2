"""Autocomplete choice filtering."""

from collections import Counter
from typing import Any, Iterable, NamedTuple, Optional

from prompt_toolkit.completion import CompleteEvent, Completer, Completion
from prompt_toolkit.document import Document


class Choice(NamedTuple):
    name: str
    value: Any


def resolve(candidates: list[Choice], query: Optional[str]) -> list[Choice]:
    """Filter candidates to those whose name contains query (case-insensitive).

    No query returns the candidates unchanged. Order is always preserved.
    """
    if query is None:
        return candidates
    needle = query.lower()
    return [c for c in candidates if needle in c.name.lower()]


def disambiguate(candidates: list[Choice]) -> list[Choice]:
    """Suffix repeated names with " (#<value>)" so every name maps to one record.

    Sentinel choices (value None) keep their name.
    """
    counts = Counter(c.name.lower() for c in candidates)
    return [
        Choice(f"{c.name} (#{c.value})", c.value)
        if counts[c.name.lower()] > 1 and c.value is not None
        else c
        for c in candidates
    ]


def find_choice(candidates: list[Choice], answer: Optional[str]) -> Optional[Choice]:
    """Return the candidate whose name equals answer (case-insensitive), if any."""
    if answer is None:
        return None
    wanted = answer.strip().lower()
    for choice in candidates:
        if choice.name.lower() == wanted:
            return choice
    return None


class ChoiceCompleter(Completer):
    """prompt_toolkit completer backed by resolve().

    Runs on every keystroke; the async completion path wraps this generator.
    """

    def __init__(self, candidates: list[Choice]):
        self.candidates = candidates

    def get_completions(
        self, document: Document, complete_event: CompleteEvent
    ) -> Iterable[Completion]:
        typed = document.text_before_cursor
        for choice in resolve(self.candidates, typed or None):
            yield Completion(choice.name, start_position=-len(typed))

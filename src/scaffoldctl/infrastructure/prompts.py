"""Prompt service backed by click.

In non-interactive mode every question resolves to its default, so the
same setup run can be scripted with ``--no-interact``.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any, Literal, Protocol

import click

from scaffoldctl.domain.errors import PromptAbortedError


@dataclass(frozen=True)
class Question:
    """One prompt: a yes/no confirmation or a free-text input."""

    name: str
    message: str
    default: bool | str = False
    kind: Literal["confirm", "input"] = "confirm"


class Prompter(Protocol):
    """Anything that can answer a list of questions."""

    def prompt(self, questions: Sequence[Question]) -> dict[str, Any]: ...


class ClickPrompter:
    """Ask questions on the terminal with ``click.confirm``/``click.prompt``."""

    def __init__(self, *, interactive: bool = True) -> None:
        self.interactive = interactive

    def prompt(self, questions: Sequence[Question]) -> dict[str, Any]:
        """Return a mapping of question name to answer.

        Raises:
            PromptAbortedError: The user pressed Ctrl-C or closed stdin.
        """
        answers: dict[str, Any] = {}
        for question in questions:
            if not self.interactive:
                answers[question.name] = question.default
                continue
            try:
                if question.kind == "confirm":
                    answers[question.name] = click.confirm(
                        question.message, default=bool(question.default)
                    )
                else:
                    answers[question.name] = click.prompt(
                        question.message, default=str(question.default), show_default=True
                    )
            except click.Abort as exc:
                raise PromptAbortedError from exc
        return answers

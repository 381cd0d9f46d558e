"""Environment file merger: batch-granular, idempotent key/value appends.

Declarations are split by visibility into a public and a secret batch.
Each batch is all-or-nothing: if any of its keys already occurs anywhere in
the target buffer, the whole batch is skipped. Re-running a successful merge
is therefore a no-op, but a batch mixing present and new keys never
partially fills in the new ones.

An optional example file receives every declaration, with values replaced
by placeholders, under the same all-or-nothing rule.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import StrEnum

from pydantic import BaseModel, field_validator

_KEY_RE = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*$")


class Visibility(StrEnum):
    """Which environment file a declaration belongs to."""

    PUBLIC = "public"
    SECRET = "secret"


class BatchStatus(StrEnum):
    """What happened to one visibility batch during a merge."""

    APPENDED = "appended"
    SKIPPED = "skipped"
    EMPTY = "empty"


class EnvDeclaration(BaseModel):
    """A single ``KEY=value`` declaration."""

    model_config = {"frozen": True}

    key: str
    value: str = ""
    description: str | None = None
    visibility: Visibility = Visibility.PUBLIC

    @field_validator("key")
    @classmethod
    def _check_key(cls, value: str) -> str:
        if not _KEY_RE.match(value):
            msg = f"Invalid environment key: {value!r}"
            raise ValueError(msg)
        return value

    @field_validator("value")
    @classmethod
    def _check_value(cls, value: str) -> str:
        if "\n" in value:
            msg = "Environment values must be single-line"
            raise ValueError(msg)
        return value


@dataclass(frozen=True)
class EnvFileSet:
    """The public and secret buffers. Absent files are empty strings."""

    public: str = ""
    secret: str = ""

    def buffer(self, visibility: Visibility) -> str:
        return self.public if visibility is Visibility.PUBLIC else self.secret

    def replace(self, visibility: Visibility, text: str) -> EnvFileSet:
        if visibility is Visibility.PUBLIC:
            return EnvFileSet(public=text, secret=self.secret)
        return EnvFileSet(public=self.public, secret=text)


@dataclass(frozen=True)
class EnvMergeOutcome:
    """Updated buffers plus the per-visibility batch status."""

    files: EnvFileSet
    status: dict[Visibility, BatchStatus]

    def changed(self, visibility: Visibility) -> bool:
        return self.status[visibility] is BatchStatus.APPENDED

    @property
    def any_changed(self) -> bool:
        return any(s is BatchStatus.APPENDED for s in self.status.values())


def partition(
    declarations: list[EnvDeclaration],
) -> dict[Visibility, list[EnvDeclaration]]:
    """Group declarations by visibility, preserving relative order."""
    batches: dict[Visibility, list[EnvDeclaration]] = {v: [] for v in Visibility}
    for decl in declarations:
        batches[decl.visibility].append(decl)
    return batches


def has_any_key(buffer: str, batch: list[EnvDeclaration]) -> bool:
    """True if any key in *batch* occurs anywhere in *buffer* (substring match)."""
    return any(decl.key in buffer for decl in batch)


def render_block(
    batch: list[EnvDeclaration],
    section_label: str | None = None,
    *,
    separate: bool = False,
) -> str:
    """Render *batch* as a newline-terminated block.

    Examples:
        >>> decls = [EnvDeclaration(key="A", value="1", description="first")]
        >>> render_block(decls, "Section")
        '# Section\\n# first\\nA=1\\n'
    """
    lines: list[str] = []
    if separate:
        lines.append("")
    if section_label:
        lines.append(f"# {section_label}")
    for decl in batch:
        if decl.description:
            lines.append(f"# {decl.description}")
        lines.append(f"{decl.key}={decl.value}")
    return "\n".join(lines) + "\n"


def _append(buffer: str, batch: list[EnvDeclaration], label: str | None) -> str:
    if buffer and not buffer.endswith("\n"):
        buffer += "\n"
    return buffer + render_block(batch, label, separate=bool(buffer))


def merge_env(
    files: EnvFileSet,
    declarations: list[EnvDeclaration],
    section_label: str | None = None,
) -> EnvMergeOutcome:
    """Merge *declarations* into *files*, one all-or-nothing batch per visibility."""
    status: dict[Visibility, BatchStatus] = {}
    for visibility, batch in partition(declarations).items():
        if not batch:
            status[visibility] = BatchStatus.EMPTY
            continue
        buffer = files.buffer(visibility)
        if has_any_key(buffer, batch):
            status[visibility] = BatchStatus.SKIPPED
            continue
        files = files.replace(visibility, _append(buffer, batch, section_label))
        status[visibility] = BatchStatus.APPENDED
    return EnvMergeOutcome(files=files, status=status)


EXAMPLE_VALUE_PREFIX = "your_"


def example_value(decl: EnvDeclaration) -> str:
    """Placeholder value for the example file.

    Values that already read as placeholders (``your_...``) are kept; anything
    else becomes ``your_<key in lowercase>`` so real keys never leak.
    """
    if decl.value.startswith(EXAMPLE_VALUE_PREFIX):
        return decl.value
    return f"{EXAMPLE_VALUE_PREFIX}{decl.key.lower()}"


def redact(batch: list[EnvDeclaration]) -> list[EnvDeclaration]:
    """Copy *batch* with every value replaced by :func:`example_value`."""
    return [decl.model_copy(update={"value": example_value(decl)}) for decl in batch]


def merge_example(
    buffer: str,
    declarations: list[EnvDeclaration],
    section_label: str | None = None,
) -> tuple[str, BatchStatus]:
    """Merge redacted *declarations* into the example file buffer.

    The example file documents both visibilities, so all declarations form a
    single all-or-nothing batch.
    """
    if not declarations:
        return buffer, BatchStatus.EMPTY
    if has_any_key(buffer, declarations):
        return buffer, BatchStatus.SKIPPED
    return _append(buffer, redact(declarations), section_label), BatchStatus.APPENDED


def parse_assignment(raw: str, *, visibility: Visibility = Visibility.PUBLIC) -> EnvDeclaration:
    """Parse ``KEY=value`` (value may be empty) into a declaration."""
    key, sep, value = raw.partition("=")
    if not sep:
        msg = f"Expected KEY=VALUE, got {raw!r}"
        raise ValueError(msg)
    return EnvDeclaration(key=key.strip(), value=value, visibility=visibility)

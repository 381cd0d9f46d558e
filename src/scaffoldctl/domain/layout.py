"""Layout composer: idempotent provider insertion into a composition file.

The composition file renders application children through a placeholder
token (``{children}`` by default) inside a structural region (``<body>``).
Provider fragments either wrap the placeholder or are injected as siblings
at the top of the region.

Structural questions ("where is the placeholder", "which providers already
enclose it") are answered from a flat token list rather than substring
searches. Insertion itself remains a text splice so untouched parts of the
document are preserved byte for byte.

Nesting policy: last-applied-innermost. Applying A then B yields
``<A><B>{children}</B></A>``.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from enum import StrEnum

from pydantic import BaseModel, model_validator

from scaffoldctl.domain.errors import MissingTemplateError, PatchFailedError

DEFAULT_PLACEHOLDER = "{children}"
DEFAULT_REGION_TAG = "body"
PROVIDER_HINT = "Provider"

_ATTRS = r"""(?:"[^"]*"|'[^']*'|\{\{[^}]*\}\}|\{[^{}]*\}|[^>{}"'])*?"""
_TAG_PATTERN = rf"<(?P<close>/?)(?P<name>[A-Za-z][\w.]*)(?P<attrs>{_ATTRS})(?P<self>/?)>"
_FIRST_TAG_RE = re.compile(r"<\s*([A-Za-z][\w.]*)")


class TokenKind(StrEnum):
    """Kinds of tokens produced by :func:`tokenize`."""

    OPEN = "open"
    CLOSE = "close"
    SELF_CLOSING = "self_closing"
    PLACEHOLDER = "placeholder"
    TEXT = "text"


@dataclass(frozen=True)
class Token:
    """A span of the document with its structural role."""

    kind: TokenKind
    text: str
    start: int
    name: str = ""

    @property
    def end(self) -> int:
        return self.start + len(self.text)


class LayoutEditRequest(BaseModel):
    """An import line plus a provider fragment to splice into the layout.

    Attributes:
        import_line: A single import statement, added once at the top.
        fragment: Provider markup. Contains the placeholder once (wrap mode)
            or not at all (inject-only mode).
        marker: Distinguishing markup used to detect an applied fragment.
            Defaults to the fragment's first element tag (``<Name``).
        placeholder: Token representing the children to be wrapped.
    """

    model_config = {"frozen": True}

    import_line: str
    fragment: str
    marker: str | None = None
    placeholder: str = DEFAULT_PLACEHOLDER

    @model_validator(mode="after")
    def _validate_shape(self) -> LayoutEditRequest:
        if not self.import_line.strip():
            msg = "import_line must not be empty"
            raise ValueError(msg)
        if not self.fragment.strip():
            msg = "fragment must not be empty"
            raise ValueError(msg)
        if self.fragment.count(self.placeholder) > 1:
            msg = f"fragment contains {self.placeholder!r} more than once"
            raise ValueError(msg)
        return self

    @property
    def wraps(self) -> bool:
        """True when the fragment wraps the placeholder."""
        return self.placeholder in self.fragment

    @property
    def import_statement(self) -> str:
        return self.import_line.strip()

    @property
    def element_name(self) -> str | None:
        """Name of the fragment's first element, if it has one."""
        match = _FIRST_TAG_RE.search(self.fragment)
        return match.group(1) if match else None

    def is_applied(self, document: str) -> bool:
        """Whether the fragment's distinguishing markup is already present.

        Component fragments (``<ThemeProvider ...>``) are recognized by their
        element name alone. Fragments led by a plain HTML element, or with no
        element at all, must appear whole: whitespace runs may differ and the
        placeholder slot may hold anything, since later wraps fill it.
        """
        if self.marker is not None:
            return self.marker in document
        name = self.element_name
        if name is None or name[0].islower():
            return _fragment_pattern(self.fragment, self.placeholder).search(document) is not None
        return re.search(rf"<{re.escape(name)}(?![\w.])", document) is not None


def _fragment_pattern(fragment: str, placeholder: str) -> re.Pattern[str]:
    pieces = []
    for part in fragment.split(placeholder):
        words = part.split()
        if words:
            pieces.append(r"\s+".join(re.escape(word) for word in words))
    return re.compile(r"[\s\S]*?".join(pieces))


@dataclass(frozen=True)
class LayoutEdit:
    """Outcome of :func:`apply_layout_edit`.

    ``mode`` is ``"wrap"``, ``"inject"`` or ``"unchanged"`` for the body edit.
    ``parent`` names the element that now directly encloses the new fragment.
    """

    text: str
    changed: bool
    mode: str
    import_added: bool
    parent: str | None = None
    providers: list[str] = field(default_factory=list)


@dataclass(frozen=True)
class _Region:
    open: Token
    close: Token
    placeholder: Token
    providers: list[str]


# ---------------------------------------------------------------------------
# Tokenizing and structural queries
# ---------------------------------------------------------------------------


def tokenize(text: str, placeholder: str = DEFAULT_PLACEHOLDER) -> list[Token]:
    """Split *text* into tag, placeholder, and text tokens.

    Best effort: markup the pattern does not recognize stays inside TEXT
    tokens, which is harmless for the queries made here.
    """
    pattern = re.compile(rf"{_TAG_PATTERN}|(?P<placeholder>{re.escape(placeholder)})")
    tokens: list[Token] = []
    pos = 0
    for match in pattern.finditer(text):
        if match.start() > pos:
            tokens.append(Token(TokenKind.TEXT, text[pos : match.start()], pos))
        if match.group("placeholder"):
            kind = TokenKind.PLACEHOLDER
        elif match.group("close"):
            kind = TokenKind.CLOSE
        elif match.group("self"):
            kind = TokenKind.SELF_CLOSING
        else:
            kind = TokenKind.OPEN
        tokens.append(Token(kind, match.group(0), match.start(), match.group("name") or ""))
        pos = match.end()
    if pos < len(text):
        tokens.append(Token(TokenKind.TEXT, text[pos:], pos))
    return tokens


def _locate(document: str, placeholder: str, region_tag: str) -> _Region:
    tokens = tokenize(document, placeholder)

    open_index = next(
        (
            i
            for i, tok in enumerate(tokens)
            if tok.kind is TokenKind.OPEN and tok.name == region_tag
        ),
        None,
    )
    if open_index is None:
        msg = f"Could not find <{region_tag}> in layout"
        raise PatchFailedError(msg, region=region_tag)

    stack: list[str] = []
    found: Token | None = None
    providers: list[str] = []
    for tok in tokens[open_index + 1 :]:
        if tok.kind is TokenKind.OPEN:
            stack.append(tok.name)
        elif tok.kind is TokenKind.CLOSE:
            if tok.name in stack:
                # Unclosed inner openers are dropped along the way.
                while stack.pop() != tok.name:
                    pass
            elif tok.name == region_tag:
                if found is None:
                    msg = f"Placeholder {placeholder!r} not found inside <{region_tag}>"
                    raise PatchFailedError(msg, region=region_tag, placeholder=placeholder)
                return _Region(tokens[open_index], tok, found, providers)
        elif tok.kind is TokenKind.PLACEHOLDER and found is None:
            found = tok
            providers = [name for name in stack if PROVIDER_HINT in name]

    msg = f"Could not find a closed <{region_tag}> region in layout"
    raise PatchFailedError(msg, region=region_tag)


def enclosing_providers(
    document: str,
    *,
    placeholder: str = DEFAULT_PLACEHOLDER,
    region_tag: str = DEFAULT_REGION_TAG,
) -> list[str]:
    """Names of provider elements enclosing the placeholder, outermost first."""
    return _locate(document, placeholder, region_tag).providers


# ---------------------------------------------------------------------------
# Splicing
# ---------------------------------------------------------------------------


def _leading_ws(line: str) -> str:
    return line[: len(line) - len(line.lstrip())]


def _normalize_fragment(fragment: str) -> list[str]:
    """Return fragment lines with indentation relative to its closing line."""
    lines = [line.rstrip() for line in fragment.strip("\n").splitlines()]
    while lines and not lines[-1]:
        lines.pop()
    if not lines:
        return []
    first, rest = lines[0].strip(), lines[1:]
    if rest:
        base = len(_leading_ws(rest[-1]))
        rest = [line[min(base, len(_leading_ws(line))) :] for line in rest]
    return [first, *rest]


def _render_fragment(fragment: str, indent: str) -> str:
    first, *rest = _normalize_fragment(fragment)
    return first + "".join(f"\n{indent}{line}" if line else "\n" for line in rest)


def _line_indent(document: str, pos: int) -> str:
    line_start = document.rfind("\n", 0, pos) + 1
    return _leading_ws(document[line_start:pos])


def _prepend_import(document: str, statement: str) -> tuple[str, bool]:
    if statement in document:
        return document, False
    return f"{statement}\n{document}", True


def apply_layout_edit(
    document: str | None,
    request: LayoutEditRequest,
    *,
    region_tag: str = DEFAULT_REGION_TAG,
) -> LayoutEdit:
    """Apply *request* to *document* and describe what changed.

    Raises:
        MissingTemplateError: *document* is None (the file does not exist).
        PatchFailedError: The region or placeholder could not be located.
            Nothing is modified in that case, not even the import line.
    """
    if document is None:
        raise MissingTemplateError("layout document")

    body = document
    mode = "unchanged"
    parent: str | None = None
    providers: list[str] = []

    if not request.is_applied(document):
        region = _locate(document, request.placeholder, region_tag)
        providers = region.providers
        if request.wraps:
            slot = region.placeholder
            indent = _line_indent(document, slot.start)
            rendered = _render_fragment(request.fragment, indent)
            body = document[: slot.start] + rendered + document[slot.end :]
            mode = "wrap"
            parent = providers[-1] if providers else region_tag
        else:
            anchor = region.open.end
            after = document[anchor:]
            leading = after[: len(after) - len(after.lstrip())]
            if "\n" in leading:
                indent = leading.rsplit("\n", 1)[1]
                insertion = f"\n{indent}{_render_fragment(request.fragment, indent)}"
            else:
                insertion = _render_fragment(request.fragment, "")
            body = document[:anchor] + insertion + after
            mode = "inject"
            parent = region_tag

    text, import_added = _prepend_import(body, request.import_statement)
    return LayoutEdit(
        text=text,
        changed=text != document,
        mode=mode,
        import_added=import_added,
        parent=parent,
        providers=providers,
    )


def compose_layout(
    document: str | None,
    request: LayoutEditRequest,
    *,
    region_tag: str = DEFAULT_REGION_TAG,
) -> str:
    """Return *document* with *request* applied. See :func:`apply_layout_edit`."""
    return apply_layout_edit(document, request, region_tag=region_tag).text


def ensure_tag_attribute(document: str, tag: str, attribute: str) -> str:
    """Add a bare *attribute* to the first ``<tag>`` opener if it is missing."""
    for tok in tokenize(document):
        if tok.kind not in (TokenKind.OPEN, TokenKind.SELF_CLOSING) or tok.name != tag:
            continue
        if re.search(rf"(?<![\w-]){re.escape(attribute)}(?![\w-])", tok.text):
            return document
        cut = tok.end - (2 if tok.kind is TokenKind.SELF_CLOSING else 1)
        opener = document[tok.start : cut]
        head = opener.rstrip()
        patched = f"{head} {attribute}{opener[len(head) :]}{document[cut : tok.end]}"
        return document[: tok.start] + patched + document[tok.end :]
    msg = f"Could not find <{tag}> in layout"
    raise PatchFailedError(msg, tag=tag)

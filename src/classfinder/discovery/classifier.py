"""Per-line heuristics for namespace and class declarations.

The classifier sees one normalized line at a time and never looks back or
ahead. Anything it does not recognize is ``CONTINUE``: comments, docblocks,
``use`` imports, ``declare(...)`` and the open tag all pass through.
"""

from __future__ import annotations

import itertools
import re
from collections.abc import Collection, Iterable
from dataclasses import dataclass
from enum import Enum

from classfinder.config.constants import (
    ATTRIBUTE_MARKER,
    DECLARATION_KEYWORD,
    DECLARATION_MODIFIERS,
    DEFAULT_STOP_TOKENS,
    EXCLUSIVE_MODIFIERS,
    NAMESPACE_KEYWORD,
    NAMESPACE_TERMINATORS,
)

_WHITESPACE = re.compile(r"\s+")
_ATTRIBUTE_OPEN = re.compile(r"#\[ *")
_IDENTIFIER = re.compile(r"[^\W\d]\w*")

_NAMESPACE_PREFIX = f"{NAMESPACE_KEYWORD} "


class LineKind(Enum):
    CONTINUE = "continue"
    NAMESPACE = "namespace"
    DECLARATION = "declaration"
    STOP = "stop"


@dataclass(frozen=True, slots=True)
class LineResult:
    """Outcome for one line. ``value`` is the namespace or basename."""

    kind: LineKind
    value: str = ""


CONTINUE = LineResult(LineKind.CONTINUE)
STOP = LineResult(LineKind.STOP)


def build_declaration_prefixes(
    modifiers: Iterable[str] = DECLARATION_MODIFIERS,
    keyword: str = DECLARATION_KEYWORD,
    exclusive: Collection[frozenset[str]] = EXCLUSIVE_MODIFIERS,
) -> tuple[str, ...]:
    """Every valid ``<modifiers> <keyword> `` prefix, most modifiers first."""
    modifiers = tuple(modifiers)
    prefixes: list[str] = []
    for size in range(len(modifiers), -1, -1):
        for combo in itertools.permutations(modifiers, size):
            if any(pair <= set(combo) for pair in exclusive):
                continue
            prefixes.append(" ".join((*combo, keyword)) + " ")
    return tuple(prefixes)


DECLARATION_PREFIXES = build_declaration_prefixes()


def normalize_line(raw: str) -> str:
    """Collapse whitespace runs and canonicalize the attribute opener."""
    line = _WHITESPACE.sub(" ", raw)
    line = _ATTRIBUTE_OPEN.sub(ATTRIBUTE_MARKER, line)
    return line.strip()


def _strip_attribute_groups(line: str) -> str:
    """Drop complete ``#[...]`` groups leading the line."""
    while line.startswith(ATTRIBUTE_MARKER):
        depth = 0
        for index, char in enumerate(line):
            if char == "[":
                depth += 1
            elif char == "]":
                depth -= 1
                if depth == 0:
                    break
        else:
            # Attribute continues on the next line
            return line
        line = line[index + 1 :].lstrip()
    return line


def _namespace_name(line: str) -> str:
    name = line[len(_NAMESPACE_PREFIX) :]
    for terminator in NAMESPACE_TERMINATORS:
        name = name.split(terminator, 1)[0]
    return name.strip()


def classify_line(line: str, stop_tokens: Collection[str] = DEFAULT_STOP_TOKENS) -> LineResult:
    """Classify one normalized line."""
    if line.startswith(_NAMESPACE_PREFIX):
        return LineResult(LineKind.NAMESPACE, _namespace_name(line))

    word = _IDENTIFIER.match(line)
    if word is not None and word.group() in stop_tokens:
        return STOP

    if f"{DECLARATION_KEYWORD} " not in line:
        return CONTINUE

    line = _strip_attribute_groups(line)
    for prefix in DECLARATION_PREFIXES:
        if line.startswith(prefix):
            name = _IDENTIFIER.match(line, len(prefix))
            if name is None:
                return CONTINUE
            return LineResult(LineKind.DECLARATION, name.group())

    return CONTINUE

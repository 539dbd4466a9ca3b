"""Configuration constants.

Values here describe the source dialect the line classifier understands and
are NOT user-configurable. For configurable values, see models.py
(ScannerConfig).
"""

# =============================================================================
# Source dialect
# =============================================================================

NAMESPACE_KEYWORD = "namespace"
"""Keyword opening a namespace statement."""

NAMESPACE_TERMINATORS = (";", "{")
"""Characters ending the namespace name (statement or block form)."""

DECLARATION_KEYWORD = "class"
"""Keyword opening a type declaration."""

DECLARATION_MODIFIERS = ("final", "abstract", "readonly")
"""Modifiers that may precede the declaration keyword, in any order."""

EXCLUSIVE_MODIFIERS = frozenset({frozenset({"final", "abstract"})})
"""Modifier pairs that can never appear on the same declaration."""

ATTRIBUTE_MARKER = "#["
"""Canonical opening token of an attribute group."""

# =============================================================================
# Defaults mirrored by ScannerConfig
# =============================================================================

DEFAULT_SOURCE_EXTENSION = ".php"
DEFAULT_HIDDEN_PREFIX = "."
DEFAULT_NON_RECURSIVE_MARKER = "^"
DEFAULT_NAMESPACE_SEPARATOR = "\\"
DEFAULT_STOP_TOKENS = ("return", "exit", "die")

# =============================================================================
# Registry
# =============================================================================

FINGERPRINT_HEX_DIGITS = 16
"""Hex digits kept from the path digest (64 bits)."""

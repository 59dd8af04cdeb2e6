"""TypeScript property naming."""

import json
import re

IDENTIFIER = re.compile(r"^[A-Za-z_$][A-Za-z0-9_$]*$")

# Words that cannot name an interface, or that would shadow a type the
# generated fields refer to.
# fmt: off
RESERVED_TYPE_NAMES = frozenset(
    {
        # reserved words
        "break", "case", "catch", "class", "const", "continue", "debugger",
        "default", "delete", "do", "else", "enum", "export", "extends", "false",
        "finally", "for", "function", "if", "import", "in", "instanceof", "new",
        "null", "return", "super", "switch", "this", "throw", "true", "try",
        "typeof", "var", "void", "while", "with",
        # strict mode reserved words
        "implements", "interface", "let", "package", "private", "protected",
        "public", "static", "yield", "await",
        # predefined type names
        "any", "bigint", "boolean", "never", "number", "object", "string",
        "symbol", "undefined", "unknown",
        # global types used by the type mapping
        "Date",
    }
)
# fmt: on


def property_name(name: str) -> str:
    """Render a name as a TypeScript property key.

    Valid identifiers are emitted bare; anything else (spaces, dashes, leading
    digits) becomes a double-quoted string key.
    """
    if IDENTIFIER.match(name):
        return name
    return json.dumps(name, ensure_ascii=False)


def type_name(name: str) -> str:
    """Render a name as a TypeScript type identifier.

    Characters that cannot appear in an identifier are replaced by ``_`` and a
    leading digit gets a ``_`` prefix. Reserved words and the names in
    RESERVED_TYPE_NAMES get a ``_`` suffix.
    """
    cleaned = re.sub(r"[^A-Za-z0-9_$]", "_", name)
    if not cleaned or cleaned[0].isdigit():
        cleaned = f"_{cleaned}"
    if cleaned in RESERVED_TYPE_NAMES:
        cleaned = f"{cleaned}_"
    return cleaned


def unique_type_names(names: list[str]) -> dict[str, str]:
    """Map each name to a distinct type identifier.

    Names are processed in order. When a sanitized name is already taken, the
    later one gets the first free ``_2``, ``_3`` ... suffix.

    Example:
        ["Order Lines", "Order_Lines"] -> Order_Lines, Order_Lines_2
    """
    taken: set[str] = set()
    result: dict[str, str] = {}
    for name in names:
        candidate = base = type_name(name)
        counter = 2
        while candidate in taken:
            candidate = f"{base}_{counter}"
            counter += 1
        taken.add(candidate)
        result[name] = candidate
    return result

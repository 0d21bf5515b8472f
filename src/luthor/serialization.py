"""Token serialization: JSON round-trip for Luthor token lists.

Converts tokens to/from JSON-compatible dicts. Useful for:
- Golden files in tests of downstream parsers
- Handing tokens to out-of-process tools
- Debugging and inspection

All output is deterministic (sorted keys).

Example:
    from luthor import lex
    from luthor.serialization import to_json, from_json

    tokens = lex("set x to y")
    assert from_json(to_json(tokens)) == tokens

Thread Safety:
    All functions are pure and safe to call from any thread.

"""

import json
from typing import Any

from luthor.location import SourceSpan
from luthor.tokens import Token, TokenType


def to_dict(token: Token) -> dict[str, Any]:
    """Convert a token to a JSON-compatible dict.

    The type is stored by name; EOF has ``"span": None``.

    Args:
        token: Any Luthor token.

    Returns:
        Dict with ``type``, ``value`` and ``span``.

    """
    span = None
    if token.span is not None:
        span = {"line": token.span.line, "column": token.span.column}
    return {"type": token.type.name, "value": token.value, "span": span}


def from_dict(data: dict[str, Any]) -> Token:
    """Reconstruct a token from a dict.

    Args:
        data: Dict as produced by to_dict.

    Returns:
        Token (frozen dataclass).

    Raises:
        ValueError: If ``type`` is missing or unknown, or ``span`` is malformed.

    """
    type_name = data.get("type")
    if type_name is None:
        msg = "Missing 'type' field in serialized token"
        raise ValueError(msg)

    try:
        token_type = TokenType[type_name]
    except KeyError:
        msg = f"Unknown token type: {type_name!r}"
        raise ValueError(msg) from None

    raw_span = data.get("span")
    span = None
    if raw_span is not None:
        try:
            line, column = raw_span["line"], raw_span["column"]
        except (KeyError, TypeError) as exc:
            msg = f"Malformed span for {type_name} token: {raw_span!r}"
            raise ValueError(msg) from exc
        # bool is an int subclass; spans are 1-based
        for value in (line, column):
            if isinstance(value, bool) or not isinstance(value, int) or value < 1:
                msg = f"Malformed span for {type_name} token: {raw_span!r}"
                raise ValueError(msg)
        span = SourceSpan(line=line, column=column)

    return Token(token_type, data.get("value", ""), span)


def to_json(tokens: list[Token], *, indent: int | None = None) -> str:
    """Serialize a token list to a JSON string.

    Args:
        tokens: Tokens to serialize.
        indent: JSON indentation level (None for compact).

    Returns:
        JSON string.

    """
    return json.dumps([to_dict(token) for token in tokens], sort_keys=True, indent=indent)


def from_json(data: str) -> list[Token]:
    """Deserialize a token list from a JSON string.

    Args:
        data: JSON string (as produced by to_json).

    Returns:
        List of tokens.

    Raises:
        ValueError: If the JSON is not a list of serialized tokens.

    """
    raw = json.loads(data)
    if not isinstance(raw, list):
        msg = f"Expected a JSON array of tokens, got {type(raw).__name__}"
        raise ValueError(msg)
    if not all(isinstance(item, dict) for item in raw):
        msg = "Expected every token to be a JSON object"
        raise ValueError(msg)
    return [from_dict(item) for item in raw]

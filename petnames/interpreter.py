import json
import logging
import re
from typing import Any, List

from jsonschema import validate
from jsonschema.exceptions import ValidationError as _SchemaValidationError

from petnames.errors import ParseError, ValidationError
from petnames.prompt import NAMES_SCHEMA

logger = logging.getLogger(__name__)

# ```json, ```json title or a bare ```, then whitespace
_OPENING_FENCE = re.compile(r"\A```[\w+.-]*(?:[ \t]+[^\n{\[]*)?\s*")
_CLOSING_FENCE = re.compile(r"\s*```\Z")


def strip_code_fence(text: str) -> str:
    """Remove a Markdown code fence wrapped around a model reply.

    Each marker is handled on its own: a leading fence (with its language tag
    and any info string on that line) is dropped only if the text starts with
    one, a trailing fence only if the text ends with one. Text without fences
    comes back unchanged.
    """
    text = _OPENING_FENCE.sub("", text, count=1)
    text = _CLOSING_FENCE.sub("", text, count=1)
    return text


def parse_json(text: str) -> Any:
    try:
        return json.loads(text)
    except (json.JSONDecodeError, RecursionError) as e:
        raise ParseError(f"Failed to parse JSON from model reply: {e}") from e


def validate_names(data: Any) -> List[str]:
    try:
        validate(instance=data, schema=NAMES_SCHEMA)
    except _SchemaValidationError as e:
        raise ValidationError(
            f"Model reply does not match the names schema: {e.message}"
        ) from e
    return data["names"]


def interpret(reply: str) -> List[str]:
    """Turn the raw model reply into the list of names it contains.

    Names are returned verbatim and in order; duplicates and counts other than
    the requested five are accepted.
    """
    cleaned = strip_code_fence(reply.strip())
    logger.debug("Cleaned model reply: %s", cleaned)
    return validate_names(parse_json(cleaned))

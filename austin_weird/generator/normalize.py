"""
Parsing and string coercion for text-model output.

The model is asked for four plain strings but does not always comply:
recipes come back as objects, values come back as numbers or lists, keys
go missing. Everything is coerced into the flat string schema here.
"""
import json
import logging

from austin_weird.generator.content import FIELD_DEFAULTS

logger = logging.getLogger(__name__)

RECIPE_KEYS = ('name', 'ingredients', 'instructions')


def parse_content_response(raw: str) -> dict | None:
    """
    Parse the JSON object returned by the text model.
    Returns None if the text is not JSON or not a JSON object.
    """
    raw = raw.strip()
    # Strip markdown code fences if present
    if raw.startswith('```'):
        lines = raw.split('\n')
        raw = '\n'.join(lines[1:-1])

    try:
        data = json.loads(raw)
    except ValueError as e:
        logger.warning(f"Failed to parse content response: {e}\nRaw: {raw[:200]}")
        return None

    if not isinstance(data, dict):
        logger.warning(f"Content response is {type(data).__name__}, not an object")
        return None
    return data


def _join_part(part) -> str:
    if isinstance(part, (list, tuple)):
        return ', '.join(ensure_string(p) for p in part)
    return ensure_string(part)


def _has_part(value) -> bool:
    # Empty lists and dicts still count as a recipe part
    if isinstance(value, (list, tuple, dict)):
        return True
    return bool(value)


def _is_recipe(value: dict) -> bool:
    return all(_has_part(value.get(key)) for key in RECIPE_KEYS)


def ensure_string(value) -> str:
    """
    Coerce a response value into a string.

    - str: unchanged
    - recipe-shaped dict: "<name>: <ingredients>. <instructions>"
    - any other dict or list: compact JSON
    - bool / None: JSON spelling ("true", "false", "null")
    - anything else: str()
    """
    if isinstance(value, str):
        return value

    if isinstance(value, dict):
        if _is_recipe(value):
            return (
                f"{_join_part(value['name'])}: "
                f"{_join_part(value['ingredients'])}. "
                f"{_join_part(value['instructions'])}"
            )
        return json.dumps(value, separators=(',', ':'), ensure_ascii=False)

    if isinstance(value, (list, tuple)):
        return json.dumps(value, separators=(',', ':'), ensure_ascii=False)

    if isinstance(value, bool) or value is None:
        return json.dumps(value)

    return str(value)


def is_blank(value) -> bool:
    """True for values treated as a missing field."""
    if value is None or value is False:
        return True
    if isinstance(value, str):
        return not value.strip()
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return value == 0
    return False


def normalize_field(data: dict, key: str) -> str:
    value = data.get(key)
    if is_blank(value):
        return FIELD_DEFAULTS[key]
    text = ensure_string(value)
    # Recipe parts or str() output can still come out empty
    return text if text.strip() else FIELD_DEFAULTS[key]


def normalize_fields(data: dict) -> dict:
    """Return the four wire fields as non-empty strings."""
    return {key: normalize_field(data, key) for key in FIELD_DEFAULTS}

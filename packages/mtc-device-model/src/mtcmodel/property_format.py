from typing import Annotated, Optional

from pydantic import BeforeValidator

ID_EXTRA_CHARS = "-_."


def is_entity_id(v: str) -> str:
    """
    EntityId format: a non-empty word that starts with an alphabet char or an
    underscore, followed by alphanumerics, hyphens, underscores or periods.
    Ids are the lookup keys of a device's identity index, so whitespace is
    never allowed.

    Raises:
        ValueError: if v is not EntityId format
    """
    if not isinstance(v, str):
        raise ValueError(f"<{v}> must be string. Got type <{type(v)}>")  # noqa: TRY004
    if not v:
        raise ValueError("EntityId must not be empty")
    first_char = v[0]
    if not (first_char.isalpha() or first_char == "_"):
        raise ValueError(
            f"<{v}>: Fails EntityId format! Must start with alphabet char or '_'."
        )
    for char in v:
        if not (char.isalnum() or char in ID_EXTRA_CHARS):
            raise ValueError(
                f"<{v}>: Fails EntityId format! Chars must be alphanumeric "
                f"or one of '{ID_EXTRA_CHARS}'."
            )
    return v


def parse_sample_interval(v: Optional[str | float]) -> Optional[float]:
    """Parse a sampleInterval / sampleRate attribute value.

    None and the empty string mean "unset". Zero is a real interval and is kept.

    Raises:
        ValueError: if v is set but is not a non-negative number
    """
    if v is None or v == "":
        return None
    try:
        interval = float(v)
    except (TypeError, ValueError) as e:
        raise ValueError(f"<{v}> is not a valid sample interval") from e
    if interval < 0:
        raise ValueError(f"<{v}> sample interval must not be negative")
    return interval


def format_sample_interval(v: float) -> str:
    return f"{v:g}"


EntityId = Annotated[str, BeforeValidator(is_entity_id)]

"""Change-event value extraction.

UI layers hand controllers whatever their toolkit emits on input
change. ``extract_value`` understands the common shapes; pass a custom
extractor in ``FormOptions`` for anything else.
"""

from collections.abc import Mapping
from typing import Any


def extract_value(event: Any) -> str:
    """Return the new string value carried by a change *event*.

    Accepts, in order:

    - a ``str`` (the value itself)
    - a DOM-style event with ``event.target.value``
    - an object with ``event.value``
    - a mapping with a ``"value"`` key

    Raises:
        TypeError: If no value can be found on *event*.
    """
    if isinstance(event, str):
        return event

    target = getattr(event, "target", None)
    if target is not None and hasattr(target, "value"):
        return _as_str(target.value)

    if hasattr(event, "value"):
        return _as_str(event.value)

    if isinstance(event, Mapping) and "value" in event:
        return _as_str(event["value"])

    msg = f"Cannot extract a value from change event of type {type(event).__name__}"
    raise TypeError(msg)


def _as_str(value: Any) -> str:
    return "" if value is None else str(value)

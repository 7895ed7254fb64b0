"""Field readers for detector settings and manifest entries.

YAML files and `ARABIC_OVERLAP_*` variables deliver the same fields with
different types: YAML yields `int`/`bool` scalars, the environment only text.
Every reader accepts both and reports failures against a source label such as
``YAML `detector.yml` `` or ``Environment``.
"""

from __future__ import annotations

from collections.abc import Mapping, Set
from typing import Any


FLAG_TOKENS = {
    "1": True,
    "true": True,
    "yes": True,
    "on": True,
    "0": False,
    "false": False,
    "no": False,
    "off": False,
}


def clean_token(value: object) -> str | None:
    """Return `value` as stripped text, or `None` when nothing is left."""

    if value is None:
        return None
    return str(value).strip() or None


def read_window_int(
    payload: Mapping[str, Any], key: str, *, source_label: str, default: int
) -> int:
    """Read a strictly positive integer such as `ngram_size` or `hash_modulus`.

    Missing and blank fields fall back to `default`. `True`/`False` are refused
    even though `bool` subclasses `int`, so `ngram_size: yes` is an error.

    Raises:
        ValueError: If the field is present but not a positive integer.
    """

    raw = payload.get(key)
    if clean_token(raw) is None:
        return default

    parsed: int | None = None
    if isinstance(raw, int) and not isinstance(raw, bool):
        parsed = raw
    elif isinstance(raw, str):
        try:
            parsed = int(raw.strip())
        except ValueError:
            parsed = None
    if parsed is None or parsed <= 0:
        raise ValueError(f"{source_label} field `{key}` must be a positive integer.")
    return parsed


def read_flag(
    payload: Mapping[str, Any], key: str, *, source_label: str, default: bool
) -> bool:
    """Read an on/off switch like `fold_alef_maksura`.

    Raises:
        ValueError: If the token is not one of `FLAG_TOKENS`.
    """

    if key not in payload:
        return default
    raw = payload[key]
    if isinstance(raw, bool):
        return raw

    token = clean_token(raw)
    if token is not None and token.lower() in FLAG_TOKENS:
        return FLAG_TOKENS[token.lower()]
    raise ValueError(
        f"{source_label} field `{key}` must be a boolean value "
        "(`true`/`false`, `1`/`0`, `yes`/`no`)."
    )


def read_choice(
    payload: Mapping[str, Any],
    key: str,
    *,
    source_label: str,
    choices: Set[str],
    default: str,
) -> str:
    """Read a case-insensitive enumerated field such as `hash_unit`.

    Raises:
        ValueError: If the lowered token is not in `choices`.
    """

    token = clean_token(payload.get(key))
    if token is None:
        return default
    token = token.lower()
    if token not in choices:
        supported = ", ".join(sorted(choices))
        raise ValueError(
            f"{source_label} field `{key}` has unsupported value `{token}`; "
            f"supported: {supported}."
        )
    return token

"""Shareable state tokens: ``InputAssumptions`` ⇄ URL-safe text.

Token = base64url (no padding) of the compact camelCase JSON snapshot, so it
can sit in a ``?s=`` query parameter as-is.  Decoding also accepts tokens
written by the browser calculator (percent-encoded standard
base64 of the same JSON shape).
"""

from __future__ import annotations

import base64
import binascii
import json
from urllib.parse import quote, unquote

from pydantic import ValidationError

from governos_roi.config.assumptions import InputAssumptions

SHARE_QUERY_PARAM = "s"


class ShareTokenError(ValueError):
    """Token could not be decoded into a valid ``InputAssumptions``."""


def encode_state(inputs: InputAssumptions) -> str:
    payload = inputs.model_dump_json(by_alias=True).encode("utf-8")
    return base64.urlsafe_b64encode(payload).decode("ascii").rstrip("=")


def decode_state(token: str) -> InputAssumptions:
    """Restore inputs from a share token.  Raises ``ShareTokenError``."""
    raw = unquote(token.strip()).replace("+", "-").replace("/", "_")
    raw += "=" * (-len(raw) % 4)
    try:
        payload = base64.b64decode(raw, altchars=b"-_", validate=True)
        data = json.loads(payload.decode("utf-8"))
    except (binascii.Error, UnicodeDecodeError, json.JSONDecodeError) as exc:
        raise ShareTokenError(f"Malformed share token: {exc}") from exc

    if not isinstance(data, dict):
        raise ShareTokenError("Share token does not contain an input snapshot")
    try:
        return InputAssumptions.model_validate(data)
    except ValidationError as exc:
        raise ShareTokenError(f"Share token holds invalid inputs: {exc}") from exc


def share_query(inputs: InputAssumptions) -> str:
    """Query string fragment, e.g. ``?s=eyJwcm9m...``."""
    return f"?{SHARE_QUERY_PARAM}={quote(encode_state(inputs), safe='')}"

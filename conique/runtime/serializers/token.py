# Copyright (c) 2026 Conique
# SPDX-License-Identifier: MIT

"""
Share-URL token serializer.

Packs the full editor state into a base64 token carried in the URL
fragment, and reads it back. The token is base64 over compact JSON of
``AppState.to_dict()``, which is byte-compatible with tokens produced by
the browser editor (``btoa(JSON.stringify(state))``).

Decoding is all-or-nothing: a token that fails any step returns None and
the caller falls back to ``default_state()``.
"""

from __future__ import annotations

import base64
import json
import logging
from typing import Optional
from urllib.parse import urlsplit

from conique.schema import AppState

logger = logging.getLogger(__name__)

_REQUIRED_NUMBERS = ("previewW", "previewH", "selectedLayerId")


def _is_number(value) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def encode_state(state: AppState, *, urlsafe: bool = False) -> str:
    """Serialize an AppState as a URL-fragment token.

    Args:
        state: State to encode.
        urlsafe: Use the ``-``/``_`` base64 alphabet instead of ``+``/``/``.
            Both decode with ``decode_state``.

    Returns:
        ASCII token (without the leading ``#``).
    """
    raw = state.to_json().encode("utf-8")
    encoded = base64.urlsafe_b64encode(raw) if urlsafe else base64.b64encode(raw)
    return encoded.decode("ascii")


def _token_bytes(token: str) -> bytes:
    token = token.strip()
    if token.startswith("#"):
        token = token[1:]
    token = token.replace("-", "+").replace("_", "/")
    token += "=" * (-len(token) % 4)
    return base64.b64decode(token, validate=True)


def _check_shape(data) -> Optional[str]:
    """Describe the first structural problem, or None if the shape is valid."""
    if not isinstance(data, dict):
        return f"top level is {type(data).__name__}, expected object"
    if not isinstance(data.get("layers"), list):
        return "'layers' missing or not a list"
    for key in _REQUIRED_NUMBERS:
        if not _is_number(data.get(key)):
            return f"{key!r} missing or not a number"
    return None


def decode_state(token: str) -> Optional[AppState]:
    """Rebuild an AppState from a token.

    Accepts a leading ``#``, either base64 alphabet and missing padding.

    Returns:
        The decoded state, or None if the token cannot be decoded, is not
        JSON, or does not have the AppState shape. Never raises.
    """
    if not isinstance(token, str) or not token.strip().lstrip("#"):
        return None
    try:
        data = json.loads(_token_bytes(token).decode("utf-8"))
        problem = _check_shape(data)
        if problem is not None:
            logger.warning("Rejected state token: %s", problem)
            return None
        return AppState.from_dict(data)
    except (ValueError, TypeError, KeyError, AttributeError, RecursionError) as exc:
        logger.warning("Failed to decode state token: %s", exc)
        return None


def with_state(url: str, state: AppState, *, urlsafe: bool = False) -> str:
    """Return ``url`` with its fragment replaced by the state token."""
    return urlsplit(url)._replace(fragment=encode_state(state, urlsafe=urlsafe)).geturl()


def state_from_url(url: str) -> Optional[AppState]:
    """Decode the state carried in a URL fragment, if any."""
    fragment = urlsplit(url).fragment
    if not fragment:
        return None
    return decode_state(fragment)

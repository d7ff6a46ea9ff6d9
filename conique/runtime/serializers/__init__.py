# Copyright (c) 2026 Conique
# SPDX-License-Identifier: MIT

"""
Serializers for gradient layers and editor state.

Each serializer produces one text form: a CSS declaration, a Tailwind
class, or a share-URL token. None of them modify the state they read.
"""

from conique.runtime.serializers.css import to_css, to_css_with_size
from conique.runtime.serializers.tailwind import to_tailwind
from conique.runtime.serializers.token import (
    decode_state,
    encode_state,
    state_from_url,
    with_state,
)

__all__ = [
    "to_css",
    "to_css_with_size",
    "to_tailwind",
    "encode_state",
    "decode_state",
    "with_state",
    "state_from_url",
]

# Copyright (c) 2026 Conique
# SPDX-License-Identifier: MIT

"""
Output runtime for Conique.

Turns editor state into text for the outside world:

1. CSS -- ``background:`` declaration for stylesheets
2. Tailwind -- ``bg-[...]`` arbitrary-value class
3. Token -- base64 state for the share URL fragment

Serialization never modifies the layers it reads.
"""

from conique.runtime.serializers import (
    decode_state,
    encode_state,
    state_from_url,
    to_css,
    to_css_with_size,
    to_tailwind,
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

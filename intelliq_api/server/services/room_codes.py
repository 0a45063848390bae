"""Invite code generation for multiplayer rooms."""

from __future__ import annotations

import secrets

# Ambiguous characters (I, O, l, 0, 1) are left out.
ROOM_CODE_ALPHABET = "ABCDEFGHJKLMNPQRSTUVWXYZabcdefghijkmnopqrstuvwxyz23456789"
DEFAULT_ROOM_CODE_LENGTH = 4


def generate_room_code(length: int = DEFAULT_ROOM_CODE_LENGTH) -> str:
    """Return a random invite code of ``length`` characters."""
    if length < 1:
        raise ValueError("Room code length must be positive")
    return "".join(secrets.choice(ROOM_CODE_ALPHABET) for _ in range(length))

# alphabet.py
from __future__ import annotations

from typing import Dict


# 26 літер латинської абетки (верхній регістр, нормативний порядок)
ALPHABET = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
ALPHABET_SIZE = len(ALPHABET)
POS: Dict[str, int] = {ch: i for i, ch in enumerate(ALPHABET)}


class InvalidKeyError(ValueError):
    """Ключ порожній або не містить жодної латинської літери."""


class MalformedCiphertextError(ValueError):
    """Шифротекст не можна розбити на повні біграми."""


def is_letter(ch: str) -> bool:
    """True лише для ASCII-літер A-Z / a-z."""
    return ch.isascii() and ch.upper() in POS


def letters_only(text: str) -> str:
    """Верхній регістр, лише літери A-Z."""
    return "".join(ch.upper() for ch in text if is_letter(ch))


def normalize_key(key: str) -> str:
    """
    Нормалізує рядковий ключ: прибирає все, крім літер, і переводить у верхній регістр.
    Якщо літер не залишилось, кидає InvalidKeyError.
    """
    if not isinstance(key, str):
        raise InvalidKeyError(f"Ключ має бути рядком, отримано {type(key).__name__}.")
    key_up = letters_only(key)
    if not key_up:
        raise InvalidKeyError("Ключ не може бути порожнім і має містити хоча б одну латинську літеру.")
    return key_up

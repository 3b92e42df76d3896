# shift.py
from __future__ import annotations

from .alphabet import ALPHABET, ALPHABET_SIZE, POS, is_letter


DEFAULT_SHIFT = 3


class ShiftCipher:
    """Шифр зсуву (Цезаря) для латинської абетки."""
    def __init__(self, shift: int = DEFAULT_SHIFT):
        # bool є підкласом int, але зсувом не є
        if isinstance(shift, bool) or not isinstance(shift, int):
            raise TypeError(f"Зсув має бути цілим числом, отримано {type(shift).__name__}.")
        self.shift_raw = shift
        self.shift = shift % ALPHABET_SIZE  # нормалізований зсув 0..25

    def encrypt(self, text: str) -> str:
        return self._transform(text, self.shift)

    def decrypt(self, text: str) -> str:
        return self._transform(text, -self.shift)

    def _transform(self, text: str, shift: int) -> str:
        res = []
        for ch in text:
            if is_letter(ch):
                up = ch.upper()
                new_ch = ALPHABET[(POS[up] + shift) % ALPHABET_SIZE]
                # зберігаємо регістр
                if ch.islower():
                    new_ch = new_ch.lower()
                res.append(new_ch)
            else:
                res.append(ch)
        return "".join(res)


def shift_encrypt(text: str, offset: int) -> str:
    return ShiftCipher(offset).encrypt(text)


def shift_decrypt(text: str, offset: int) -> str:
    return ShiftCipher(offset).decrypt(text)

# running_key.py
from __future__ import annotations

from typing import List

from .alphabet import ALPHABET, ALPHABET_SIZE, POS, is_letter, normalize_key


class RunningKeyCipher:
    """
    Поліалфавітний шифр з циклічним ключем (Віженер).
    Зсув для кожної літери береться з чергової літери ключа;
    символи, що не є літерами, проходять без змін і не витрачають позицію ключа.
    """
    def __init__(self, key: str):
        self.key = normalize_key(key)
        self.key_schedule: List[int] = [POS[ch] for ch in self.key]

    def encrypt(self, text: str) -> str:
        return self._process(text, mode="encrypt")

    def decrypt(self, text: str) -> str:
        return self._process(text, mode="decrypt")

    def _process(self, text: str, mode: str) -> str:
        res = []
        k = 0  # індекс ключа збільшується лише коли обробляємо літеру

        for ch in text:
            if is_letter(ch):
                up = ch.upper()
                t_i = POS[up]
                k_i = self.key_schedule[k % len(self.key_schedule)]

                if mode == "encrypt":
                    new_i = (t_i + k_i) % ALPHABET_SIZE
                else:
                    new_i = (t_i - k_i) % ALPHABET_SIZE

                new_ch = ALPHABET[new_i]
                if ch.islower():
                    new_ch = new_ch.lower()

                res.append(new_ch)
                k += 1
            else:
                res.append(ch)

        return "".join(res)


def running_key_encrypt(text: str, key: str) -> str:
    return RunningKeyCipher(key).encrypt(text)


def running_key_decrypt(text: str, key: str) -> str:
    return RunningKeyCipher(key).decrypt(text)

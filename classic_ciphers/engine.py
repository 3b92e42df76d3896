# engine.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict, Tuple, Union

from .digraph import digraph_decrypt, digraph_encrypt
from .running_key import running_key_decrypt, running_key_encrypt
from .shift import shift_decrypt, shift_encrypt


CIPHERS = ("shift", "running-key", "digraph")
MODES = ("encrypt", "decrypt")

KeyMaterial = Union[int, str]

_DISPATCH: Dict[Tuple[str, str], Callable[[str, KeyMaterial], str]] = {
    ("shift", "encrypt"): shift_encrypt,
    ("shift", "decrypt"): shift_decrypt,
    ("running-key", "encrypt"): running_key_encrypt,
    ("running-key", "decrypt"): running_key_decrypt,
    ("digraph", "encrypt"): digraph_encrypt,
    ("digraph", "decrypt"): digraph_decrypt,
}


@dataclass(frozen=True)
class CipherRequest:
    cipher: str   # shift / running-key / digraph
    mode: str     # encrypt / decrypt
    text: str
    key: KeyMaterial  # int для shift, рядок для інших

    def run(self) -> str:
        return transform(self.cipher, self.mode, self.text, self.key)


def transform(cipher: str, mode: str, text: str, key: KeyMaterial) -> str:
    """
    Єдина точка входу для зовнішнього шару (CLI, UI).
    Усі параметри передаються явно, стану між викликами немає.
    """
    if cipher not in CIPHERS:
        raise ValueError(f"Невідомий шифр '{cipher}'. Доступні: {', '.join(CIPHERS)}.")
    if mode not in MODES:
        raise ValueError(f"Невідомий режим '{mode}'. Доступні: {', '.join(MODES)}.")
    return _DISPATCH[(cipher, mode)](text, key)

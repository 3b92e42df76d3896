# -*- coding: utf-8 -*-
"""
Біграмний шифр заміни на матриці 5x5 (класичний Плейфер).

Покроковий алгоритм:
1) Ключ -> верхній регістр, J -> I, прибрати все, крім літер.
2) Матриця: літери ключа + абетка без J, кожна літера лише один раз (25 клітинок).
3) Текст -> верхній регістр, J -> I, лише літери (регістр і розділові знаки не зберігаються).
4) Розбиття на біграми: якщо наступна літера така сама або її немає, друга літера біграми = X.
5) Заміна біграми (a, b):
   - один рядок    -> кожна літера на 1 стовпчик праворуч (розшифрування: ліворуч);
   - один стовпчик -> кожна літера на 1 рядок нижче (розшифрування: вище);
   - прямокутник   -> кожна літера бере стовпчик іншої (саме собі обернене).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Tuple

from .alphabet import MalformedCiphertextError, letters_only, normalize_key


MATRIX_SIZE = 5
MATRIX_ALPHABET = "ABCDEFGHIKLMNOPQRSTUVWXYZ"  # без J
FILLER = "X"


def normalize_text(text: str) -> str:
    """Верхній регістр, J -> I, лише літери."""
    return letters_only(text).replace("J", "I")


@dataclass(frozen=True)
class CipherMatrix:
    letters: str  # 25 різних літер, рядок за рядком

    def __post_init__(self) -> None:
        if len(self.letters) != MATRIX_SIZE * MATRIX_SIZE or set(self.letters) != set(MATRIX_ALPHABET):
            raise ValueError("Матриця має містити рівно 25 різних літер A-Z без J.")

    def position(self, letter: str) -> Tuple[int, int]:
        idx = self.letters.index("I" if letter.upper() == "J" else letter.upper())
        return idx // MATRIX_SIZE, idx % MATRIX_SIZE

    def at(self, row: int, col: int) -> str:
        return self.letters[(row % MATRIX_SIZE) * MATRIX_SIZE + col % MATRIX_SIZE]

    def rows(self) -> List[str]:
        return [self.letters[i:i + MATRIX_SIZE] for i in range(0, len(self.letters), MATRIX_SIZE)]


def build_matrix(key: str) -> CipherMatrix:
    key_up = normalize_key(key).replace("J", "I")
    seen = []
    for ch in key_up + MATRIX_ALPHABET:
        if ch not in seen:
            seen.append(ch)
    return CipherMatrix("".join(seen))


def prepare_digraphs(text: str) -> List[str]:
    """
    Розбиває текст на біграми для шифрування.
    Заповнювач X вставляється лише коли наступна літера повторює поточну
    або текст закінчився.
    """
    letters = normalize_text(text)
    pairs = []
    i = 0
    while i < len(letters):
        a = letters[i]
        if i + 1 < len(letters) and letters[i + 1] != a:
            pairs.append(a + letters[i + 1])
            i += 2
        else:
            pairs.append(a + FILLER)
            i += 1
    return pairs


def _substitute(matrix: CipherMatrix, pair: str, step: int) -> str:
    row1, col1 = matrix.position(pair[0])
    row2, col2 = matrix.position(pair[1])

    if row1 == row2:
        return matrix.at(row1, col1 + step) + matrix.at(row2, col2 + step)
    if col1 == col2:
        return matrix.at(row1 + step, col1) + matrix.at(row2 + step, col2)
    return matrix.at(row1, col2) + matrix.at(row2, col1)


class DigraphCipher:
    """Шифр Плейфера. Матриця будується заново при кожному виклику і ніде не кешується."""
    def __init__(self, key: str):
        self.key = normalize_key(key)

    def matrix(self) -> CipherMatrix:
        return build_matrix(self.key)

    def encrypt(self, text: str) -> str:
        matrix = self.matrix()
        return "".join(_substitute(matrix, pair, 1) for pair in prepare_digraphs(text))

    def decrypt(self, text: str) -> str:
        matrix = self.matrix()
        letters = normalize_text(text)
        if len(letters) % 2 != 0:
            raise MalformedCiphertextError(
                f"Шифротекст має непарну кількість літер ({len(letters)}), неможливо утворити повні біграми."
            )
        return "".join(
            _substitute(matrix, letters[i:i + 2], -1) for i in range(0, len(letters), 2)
        )


def digraph_encrypt(text: str, key: str) -> str:
    return DigraphCipher(key).encrypt(text)


def digraph_decrypt(text: str, key: str) -> str:
    return DigraphCipher(key).decrypt(text)

# matrix_image.py
from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from PIL import Image, ImageDraw, ImageFont

from .alphabet import normalize_key
from .digraph import MATRIX_SIZE, build_matrix


DEFAULT_CELL = 64
MIN_CELL = 8

BACKGROUND = (255, 255, 255)
GRID = (40, 40, 40)
KEY_FILL = (255, 236, 179)   # клітинки з літерами ключа
TEXT = (0, 0, 0)


@dataclass
class MatrixImageInfo:
    path: str
    width: int
    height: int
    letters: str


def render_matrix(key: str, output_path: str | Path, cell: int = DEFAULT_CELL) -> MatrixImageInfo:
    """
    Малює матрицю 5x5 для ключа і зберігає у PNG.
    Клітинки, заповнені літерами ключа, підсвічуються.
    """
    if cell < MIN_CELL:
        raise ValueError(f"Розмір клітинки має бути не менше {MIN_CELL} px, отримано {cell}.")

    matrix = build_matrix(key)
    key_letters = set(normalize_key(key).replace("J", "I"))
    side = cell * MATRIX_SIZE

    img = Image.new("RGB", (side, side), BACKGROUND)
    draw = ImageDraw.Draw(img)
    font = ImageFont.load_default()

    for row, line in enumerate(matrix.rows()):
        for col, letter in enumerate(line):
            x0, y0 = col * cell, row * cell
            x1, y1 = x0 + cell - 1, y0 + cell - 1
            fill = KEY_FILL if letter in key_letters else BACKGROUND
            draw.rectangle([x0, y0, x1, y1], fill=fill, outline=GRID)

            label = "I/J" if letter == "I" else letter
            left, top, right, bottom = draw.textbbox((0, 0), label, font=font)
            tx = x0 + (cell - (right - left)) // 2 - left
            ty = y0 + (cell - (bottom - top)) // 2 - top
            draw.text((tx, ty), label, fill=TEXT, font=font)

    # PNG, без втрат
    img.save(output_path, format="PNG")

    return MatrixImageInfo(path=str(output_path), width=side, height=side, letters=matrix.letters)

# main.py
from __future__ import annotations

import argparse
import time
from pathlib import Path
from typing import List, Optional

from .analytics import build_report, save_report_json, save_report_txt
from .digraph import build_matrix, prepare_digraphs
from .engine import CIPHERS, transform
from .matrix_image import DEFAULT_CELL, render_matrix
from .shift import DEFAULT_SHIFT


def read_text(path: str | Path) -> str:
    return Path(path).read_text(encoding="utf-8")


def write_text(path: str | Path, data: str) -> None:
    Path(path).write_text(data, encoding="utf-8")


def ensure_parent(path: str | Path) -> None:
    Path(path).parent.mkdir(parents=True, exist_ok=True)


def resolve_input(args: argparse.Namespace) -> str:
    if args.text is not None:
        return args.text
    if args.in_file is not None:
        return read_text(args.in_file)
    return input("Введіть текст: ")


def resolve_key(args: argparse.Namespace):
    if args.cipher == "shift":
        return args.offset
    if args.key is None:
        return input("Введіть ключ (латинські літери): ").strip()
    return args.key


def key_info(cipher: str, key) -> str:
    if cipher == "shift":
        return f"зсув = {key % 26} (введено {key}, mod 26)"
    return f"ключ = '{key}'"


def run_cipher(args: argparse.Namespace) -> int:
    text = resolve_input(args)
    key = resolve_key(args)

    start = time.perf_counter()
    result = transform(args.cipher, args.cmd, text, key)
    duration = time.perf_counter() - start

    print("=" * 70)
    print(f"Алгоритм: {args.cipher} | Режим: {args.cmd}")
    print("=" * 70)
    print(f"Ключ: {key_info(args.cipher, key)}")
    print(f"\nВхід:      {text}")
    print(f"Результат: {result}")

    if args.out_file is not None:
        ensure_parent(args.out_file)
        write_text(args.out_file, result)
        print(f"\n✓ Результат збережено: {args.out_file}")

    if args.report_dir is not None:
        digraphs = prepare_digraphs(text) if args.cipher == "digraph" and args.cmd == "encrypt" else None
        report = build_report(
            cipher=args.cipher,
            mode=args.cmd,
            key_info=key_info(args.cipher, key),
            input_text=text,
            output_text=result,
            duration_seconds=duration,
            digraphs=digraphs,
        )
        ensure_parent(args.report_dir / "report.json")
        save_report_json(report, args.report_dir / "report.json")
        save_report_txt(report, args.report_dir / "report.txt")
        print(f"✓ Звіт: {args.report_dir / 'report.json'} / {args.report_dir / 'report.txt'}")

    return 0


def show_matrix(args: argparse.Namespace) -> int:
    matrix = build_matrix(args.key)

    print("=" * 30)
    print("Матриця 5x5 (J = I)")
    print("=" * 30)
    for row in matrix.rows():
        print("  " + " ".join(row))

    if args.out_image is not None:
        ensure_parent(args.out_image)
        info = render_matrix(args.key, args.out_image, cell=args.cell)
        print(f"\n✓ Зображення матриці: {info.path} ({info.width} x {info.height})")

    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Класичні шифри заміни: зсув, циклічний ключ (Віженер), біграмний (Плейфер)."
    )
    sub = parser.add_subparsers(dest="cmd", required=True)

    for cmd, help_text in (("encrypt", "Зашифрувати текст."), ("decrypt", "Розшифрувати текст.")):
        p = sub.add_parser(cmd, help=help_text)
        p.add_argument("--cipher", choices=CIPHERS, default="shift", help="Алгоритм (за замовчуванням shift).")
        p.add_argument("--offset", type=int, default=DEFAULT_SHIFT, help="Зсув для shift (за замовчуванням 3).")
        p.add_argument("--key", type=str, help="Ключ для running-key / digraph (латинські літери).")
        src = p.add_mutually_exclusive_group()
        src.add_argument("--text", type=str, help="Вхідний текст.")
        src.add_argument("--in-file", type=Path, help="Файл із вхідним текстом (UTF-8).")
        p.add_argument("--out-file", type=Path, help="Куди зберегти результат.")
        p.add_argument("--report-dir", type=Path, help="Папка для звіту (report.json + report.txt).")

    pm = sub.add_parser("matrix", help="Показати матрицю 5x5 для ключа digraph.")
    pm.add_argument("--key", required=True, type=str, help="Ключ (латинські літери).")
    pm.add_argument("--out-image", type=Path, help="Зберегти матрицю як PNG.")
    pm.add_argument("--cell", type=int, default=DEFAULT_CELL, help="Розмір клітинки у px (за замовчуванням 64).")

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        if args.cmd == "matrix":
            return show_matrix(args)
        return run_cipher(args)
    except ValueError as e:
        print(f"❌ Помилка: {e}")
        return 1
    except OSError as e:
        print(f"❌ Помилка файлу: {e}")
        return 1


if __name__ == "__main__":
    raise SystemExit(main())

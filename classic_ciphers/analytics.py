# analytics.py
from __future__ import annotations

import json
from dataclasses import asdict, dataclass
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, List, Optional

from .alphabet import is_letter


@dataclass
class CipherReport:
    cipher: str
    mode: str
    key_info: str
    input_text: str
    output_text: str
    length: int
    letter_count: int
    unique_letters: int
    letter_share: float  # частка літер A-Z серед непробільних символів (0..1)
    duration_seconds: float
    generated_at_local: str
    digraphs: Optional[List[str]] = None


def compute_metrics(text: str) -> Dict[str, float]:
    """
    Метрики результату:
    - letter_count: кількість літер A-Z
    - unique_letters: кількість різних літер (без урахування регістру)
    - letter_share: частка літер серед усіх символів, крім пробільних
    """
    total = 0
    letters = []
    for ch in text:
        if ch.isspace():
            continue
        total += 1
        if is_letter(ch):
            letters.append(ch.upper())

    letter_share = (len(letters) / total) if total else 0.0
    return {
        "letter_count": len(letters),
        "unique_letters": len(set(letters)),
        "letter_share": letter_share,
    }


def build_report(
    cipher: str,
    mode: str,
    key_info: str,
    input_text: str,
    output_text: str,
    duration_seconds: float,
    digraphs: Optional[List[str]] = None,
) -> CipherReport:
    m = compute_metrics(output_text)
    return CipherReport(
        cipher=cipher,
        mode=mode,
        key_info=key_info,
        input_text=input_text,
        output_text=output_text,
        length=len(output_text),
        letter_count=int(m["letter_count"]),
        unique_letters=int(m["unique_letters"]),
        letter_share=float(m["letter_share"]),
        duration_seconds=duration_seconds,
        generated_at_local=datetime.now().isoformat(timespec="seconds"),
        digraphs=digraphs,
    )


def report_to_dict(report: CipherReport) -> Dict[str, Any]:
    return asdict(report)


def save_report_json(report: CipherReport, path: str | Path) -> None:
    Path(path).write_text(json.dumps(report_to_dict(report), ensure_ascii=False, indent=2), encoding="utf-8")


def save_report_txt(report: CipherReport, path: str | Path) -> None:
    """
    Проста людиночитна версія звіту.
    """
    lines = []
    lines.append("ЗВІТ: Класичні шифри заміни")
    lines.append("")
    lines.append(f"Дата/час (локально): {report.generated_at_local}")
    lines.append(f"Алгоритм: {report.cipher}")
    lines.append(f"Режим: {report.mode}")
    lines.append(f"Ключ: {report.key_info}")
    lines.append("")
    lines.append(f"Вхід:      {report.input_text}")
    lines.append(f"Результат: {report.output_text}")
    if report.digraphs is not None:
        lines.append(f"Біграми:   {' '.join(report.digraphs)}")
    lines.append("")

    lines.append("Метрики:")
    lines.append(f" - Довжина результату: {report.length} символів")
    lines.append(f" - Літер A-Z: {report.letter_count}")
    lines.append(f" - Унікальних літер: {report.unique_letters}")
    lines.append(f" - Частка літер (без пробілів): {report.letter_share:.3f}")
    lines.append(f" - Час обробки: {report.duration_seconds:.6f} c")
    lines.append("")

    Path(path).write_text("\n".join(lines), encoding="utf-8")

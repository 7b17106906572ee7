"""Exportación JSON de los pasos de la ISS."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Sequence

from core.domain.models import FlyoverPass


def passes_payload(passes: Sequence[FlyoverPass]) -> list[dict]:
    return [p.model_dump(mode="json") for p in passes]


def export_passes_json(*, passes: Sequence[FlyoverPass], output_path: Path) -> Path:
    """Exporta los pasos a JSON UTF-8 con formato estable."""

    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(
        json.dumps(passes_payload(passes), ensure_ascii=False, indent=2, sort_keys=True) + "\n",
        encoding="utf-8",
    )
    return output_path

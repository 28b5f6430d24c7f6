#!/usr/bin/env python3
"""Traduz um evento do host (JSON) em requisição do Snapchat CAPI.

Uso:
    python scripts/translate_event.py --event evento.json --settings settings.json

Imprime o descritor de requisição em JSON. Nenhuma chamada de rede é feita.
Sai com código 1 e a mensagem de erro quando o evento é rejeitado.
"""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path

SRC_PATH = Path(__file__).resolve().parent.parent / "src"
if str(SRC_PATH) not in sys.path:
    sys.path.insert(0, str(SRC_PATH))

from api.normalizers import normalize_event, normalize_settings  # noqa: E402
from app.bootstrap import get_component, initialize_app  # noqa: E402


def _load_json(path: str) -> object:
    return json.loads(Path(path).read_text(encoding="utf-8"))


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument("--event", required=True, help="Arquivo JSON do evento do host")
    parser.add_argument("--settings", required=True, help="Arquivo JSON das settings")
    args = parser.parse_args(argv)

    initialize_app()
    try:
        event = normalize_event(_load_json(args.event))
    except ValueError as exc:
        print(f"Evento inválido: {exc}", file=sys.stderr)
        return 1
    settings = normalize_settings(_load_json(args.settings))

    result = get_component().dispatch(event, settings)
    if not result.success:
        print(f"[{result.error_code}] {result.error_message}", file=sys.stderr)
        return 1

    print(json.dumps(result.request.to_dict(), indent=2, ensure_ascii=False))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())

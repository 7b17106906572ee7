"""Lanzador de desarrollo de iss-flyover.

`python -m main passes` consulta IP -> coordenadas -> próximos pasos de la
ISS sin instalar el paquete: añade `src/` al path y delega en la CLI de
Typer (`cli.main`), igual que el script `iss-flyover` instalado.
"""

from __future__ import annotations

import sys
from pathlib import Path


def main() -> None:
    src = Path(__file__).resolve().parent / "src"
    if str(src) not in sys.path:
        sys.path.insert(0, str(src))

    from cli.main import run  # noqa: PLC0415

    run()


if __name__ == "__main__":
    main()

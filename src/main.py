"""Script de ejecución.

Por qué existe:
- Permite ejecutar el gateway con `python -m main ...` durante desarrollo.
- Mantiene un entrypoint simple además del script `j` de Poetry.
"""

from __future__ import annotations

from cli.main import gateway


def main() -> None:
    gateway()


if __name__ == "__main__":
    main()

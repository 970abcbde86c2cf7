# src/yahtzee/__main__.py
"""Command line entry point for the :mod:`yahtzee` package.

When executed as ``python -m yahtzee`` this module simply delegates to
:func:`yahtzee.cli.main.main`.
"""

from __future__ import annotations

from yahtzee.cli.main import main as cli_main


def main() -> None:
    """Invoke :func:`yahtzee.cli.main.main`."""

    cli_main()


if __name__ == "__main__":  # pragma: no cover - direct execution path
    main()

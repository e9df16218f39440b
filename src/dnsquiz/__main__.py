"""Module entrypoint for `python -m dnsquiz`."""

from __future__ import annotations

from .main import main_entry


def main() -> None:
    """Start the quiz shell."""
    main_entry()


if __name__ == "__main__":  # pragma: no cover
    main()

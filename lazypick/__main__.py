"""Module entrypoint for ``python -m lazypick``.

This keeps module-mode execution behavior identical to the CLI script.
All argument parsing and session setup happen in ``lazypick.cli``.
"""

from .cli import main


if __name__ == "__main__":
    main()

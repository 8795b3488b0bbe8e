"""Module entrypoint for ``python -m messfinder``.

Behaves exactly like the ``messfinder`` console script.
"""

from .cli import main


if __name__ == "__main__":
    main()

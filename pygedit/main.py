from __future__ import annotations
import sys
from pygedit.app import run_app


def main() -> int:
    """Module entrypoint for `python -m pygedit.main` or `python -m pygedit` (via __main__)."""
    return run_app(sys.argv)


if __name__ == "__main__":
    raise SystemExit(main())

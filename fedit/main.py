from __future__ import annotations

import sys

from fedit.app import run_app


def main() -> int:
    """Module entrypoint for `python -m fedit.main` or the `fedit` script."""
    return run_app(sys.argv)


if __name__ == "__main__":
    raise SystemExit(main())

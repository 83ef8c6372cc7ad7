from __future__ import annotations

from price_slice.cli import run
from price_slice.log import setup_logging


def main() -> int:
  setup_logging()
  return run()


if __name__ == "__main__":
  raise SystemExit(main())

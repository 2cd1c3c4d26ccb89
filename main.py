import sys

from hangul_rules.cli import main

if __name__ == "__main__":
    sys.exit(main())

"""Entry point for ``python -m subatomic_tokens``."""

from subatomic_tokens.cli import main

if __name__ == "__main__":
    main()

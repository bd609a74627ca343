"""CLI entry point: python -m noita_graveyard [--bones-dir PATH] [--translations PATH]"""

from noita_graveyard.ui.app import main


if __name__ == "__main__":
    main()

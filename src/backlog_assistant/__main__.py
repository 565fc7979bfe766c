"""Entry point for running Backlog Assistant with ``python -m backlog_assistant``."""

from backlog_assistant import main

if __name__ == "__main__":
    main()

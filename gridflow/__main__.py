"""Allow ``python -m gridflow``."""

from gridflow.cli import main

if __name__ == "__main__":
    main()

"""Allow running as python -m mlvscan_devcli."""
from .cli.app import main

if __name__ == "__main__":
    main()

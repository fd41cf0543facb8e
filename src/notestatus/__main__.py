"""Allow running as: python -m notestatus."""

from notestatus.interfaces.cli.app import main

if __name__ == "__main__":
    main()

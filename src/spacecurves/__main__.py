"""Command-line interface."""
from spacecurves.main import main


if __name__ == "__main__":
    main()

"""CLI entry point: python -m httpline parse [FILE]"""
from httpline.cli import main

if __name__ == "__main__":
    main()

"""Allow `python -m metascraper`."""

from metascraper.cli import main

if __name__ == "__main__":
    main()

"""Allow running as: python -m swapcalldata"""

from swapcalldata.cli import main

if __name__ == "__main__":
    main()

"""Allow running as ``python -m skuselect``."""

from skuselect.cli import main

if __name__ == "__main__":
    main()

"""Allow ``python -m trusty``."""

from .main import main

if __name__ == "__main__":
    main()

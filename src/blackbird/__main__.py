"""Allow ``python -m blackbird``."""

from blackbird.main import main

if __name__ == "__main__":
    main()

# src/localizedstrings/__main__.py
from localizedstrings.main import main

if __name__ == "__main__":
    main()

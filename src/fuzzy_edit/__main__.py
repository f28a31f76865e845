"""Entry point for running fuzzy-edit as a module.

Allows running with: python -m fuzzy_edit
"""

from .cli import main

if __name__ == "__main__":
    main()

"""Entry point for `python -m corticalzones`."""
import sys

from corticalzones.app.main import main

if __name__ == "__main__":
    sys.exit(main())

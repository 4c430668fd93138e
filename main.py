"""Entry point for the gas pricer replay."""

import sys

from gas_pricer.cli import main

if __name__ == "__main__":
    sys.exit(main())

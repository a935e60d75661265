"""Module entry point.

Invokes the CLI main function when the package is executed
with ``python -m selgen``.
"""

import sys

from selgen.cli import main

if __name__ == '__main__':
    sys.exit(main())

"""Allow ``python -m quill``.


File: __main__.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

from quill.repl import cli

if __name__ == "__main__":
    cli()

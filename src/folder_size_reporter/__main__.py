"""
Entry point for ``python -m folder_size_reporter``.

© 2026 MBP LLC. All rights reserved.
"""

from .cli import main

main(prog_name="folder-size-report")

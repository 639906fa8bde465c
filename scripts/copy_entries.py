"""Copy files, symlinks and directories into a destination directory."""

from __future__ import annotations

import sys
from pathlib import Path

from filecopy.__main__ import main

if __name__ == "__main__":
    sys.exit(main(sys.argv[1:], prog=Path(sys.argv[0]).name))

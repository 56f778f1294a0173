#!/usr/bin/env python3
"""
Account Management System Entry Point

Starts the interactive account menu.
"""

import sys
from pathlib import Path

# Add the project root to Python path
project_root = Path(__file__).parent
sys.path.insert(0, str(project_root))

from account_management.__main__ import main


if __name__ == "__main__":
    sys.exit(main())

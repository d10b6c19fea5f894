#!/usr/bin/env python3
"""
Workspace Config Tool - Main Entry Point

This module allows the package to be run as a script:
    python -m workspace_config_tool
"""

# Local imports
from workspace_config_tool.adapters.cli.main import main

if __name__ == "__main__":
    raise SystemExit(main())

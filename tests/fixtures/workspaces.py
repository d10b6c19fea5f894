# tests/fixtures/workspaces.py

"""Shared workspace documents and file helpers for tests"""

# Standard library imports
from copy import deepcopy
from json import dumps
from json import loads
from pathlib import Path

SAMPLE_WORKSPACE = {
    "version": 1,
    "newProjectRoot": "projects",
    "projects": {
        "app": {
            "root": "",
            "projectType": "application",
            "architect": {
                "build": {"options": {"assets": ["src/favicon.ico", "src/assets"]}},
            },
        }
    },
    "cli": {"packageManager": "npm", "warnings": {"versionMismatch": True}},
    "schematics": {"@schematics/angular:component": {"style": "scss"}},
}


def sample_workspace() -> dict:
    """Fresh copy of the sample document, safe to modify"""
    return deepcopy(SAMPLE_WORKSPACE)


def write_json(path: Path, data: object) -> Path:
    """Write data as indented JSON and return the path"""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(dumps(data, indent=2), encoding="utf-8")
    return path


def read_json(path: Path) -> object:
    return loads(path.read_text(encoding="utf-8"))

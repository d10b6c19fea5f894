# workspace_config_tool/core/__init__.py

"""Core domain and type definitions with no I/O"""

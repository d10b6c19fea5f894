# workspace_config_tool/adapters/__init__.py

"""Outer adapters (command line) over the application services"""

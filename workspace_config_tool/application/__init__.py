# workspace_config_tool/application/__init__.py

"""Application layer: path processing and the config command services"""

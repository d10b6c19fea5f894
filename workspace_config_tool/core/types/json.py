# workspace_config_tool/core/types/json.py

"""Types for workspace documents as they come out of json.loads"""

# Workspace documents are trees of these values. Path steps descend through
# containers only; a primitive always ends the walk.
type JSONPrimitive = str | int | float | bool | None

type JSONType = JSONDict | JSONList | JSONPrimitive
type JSONDict = dict[str, JSONType]
type JSONList = list[JSONType]

# Anything a path step can descend into
type JSONContainer = JSONDict | JSONList

__all__ = ["JSONContainer", "JSONDict", "JSONList", "JSONPrimitive", "JSONType"]

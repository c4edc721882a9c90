from .definition import JSONType, json_type

__all__ = ["JSONType", "json_type"]

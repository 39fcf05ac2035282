"""JSON to .NET

Sample application generating C# data classes from JSON documents.
"""

from .config import JsonToNetConfig
from .source_code import from_json

__all__ = ["JsonToNetConfig", "from_json"]

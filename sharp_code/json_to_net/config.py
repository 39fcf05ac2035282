"""
Configuration for the JSON to .NET sample.
"""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class JsonToNetConfig:
    """Configuration options for generating C# data classes from JSON."""

    # Namespace of the generated classes
    namespace: str = "JsonToNet.Data"

    # Using directives added to every generated file
    usings: list[str] = field(default_factory=lambda: ["System"])

    # Directory the generated files are written to
    output_directory: str = "./output"

    # Extension of the generated files
    file_extension: str = ".cs"

    @staticmethod
    def from_dict(d: dict) -> JsonToNetConfig:
        """Create a config from a dictionary."""
        config = JsonToNetConfig()
        for k, v in d.items():
            if hasattr(config, k):
                setattr(config, k, v)
        return config

    def to_dict(self) -> dict:
        """Convert config to a dictionary."""
        return {
            "namespace": self.namespace,
            "usings": self.usings,
            "output_directory": self.output_directory,
            "file_extension": self.file_extension,
        }

from dataclasses import dataclass
from typing import Any, Optional, Union

DEFAULT_MAX_DEPTH = 256


@dataclass
class ParseOptions:
    max_depth: int = DEFAULT_MAX_DEPTH
    filename: Optional[str] = None

    def __post_init__(self):
        if self.max_depth < 1:
            raise ValueError(f"max_depth must be at least 1, got {self.max_depth}")


def resolve_options(options: Union[ParseOptions, dict[str, Any], None]) -> ParseOptions:
    """Accept a ParseOptions, a dict of the same keys, or None for defaults."""
    if options is None:
        return ParseOptions()
    if isinstance(options, ParseOptions):
        return options
    if isinstance(options, dict):
        unknown = set(options) - {"max_depth", "maxDepth", "filename"}
        if unknown:
            raise TypeError(f"unknown parse options: {', '.join(sorted(unknown))}")
        max_depth = options.get("max_depth")
        if max_depth is None:
            max_depth = options.get("maxDepth")
        if max_depth is None:
            max_depth = DEFAULT_MAX_DEPTH
        return ParseOptions(max_depth=max_depth, filename=options.get("filename"))
    raise TypeError(f"options must be ParseOptions or dict, not {type(options).__name__}")

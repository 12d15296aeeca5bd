"""Pipeline entrypoints and result carriers."""

from litx.pipeline.entrypoints import parse_document, parse_file
from litx.pipeline.result import LitxParseResult, PipelineOptions

__all__ = [
    "LitxParseResult",
    "PipelineOptions",
    "parse_document",
    "parse_file",
]

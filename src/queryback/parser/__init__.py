from queryback.parser.annotations import AnnotatedBlock, AnnotationScan, parse_annotations
from queryback.parser.constraints import extract_constraints, parse_measurement, split_sub_queries
from queryback.parser.document import ParsedStyles, parse_breakpoints

__all__ = [
    "AnnotatedBlock",
    "AnnotationScan",
    "ParsedStyles",
    "extract_constraints",
    "parse_annotations",
    "parse_breakpoints",
    "parse_measurement",
    "split_sub_queries",
]

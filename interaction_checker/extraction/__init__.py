"""Label text flattening and snippet extraction."""
from interaction_checker.extraction.label_text import (
    combine_label_text,
    is_text_field,
    project_text_fields,
)
from interaction_checker.extraction.snippet_extractor import (
    CONTEXT_AFTER,
    CONTEXT_BEFORE,
    NO_DATA_MESSAGE,
    NO_MATCH_MESSAGE,
    SnippetExtractor,
)

__all__ = [
    "SnippetExtractor",
    "combine_label_text",
    "project_text_fields",
    "is_text_field",
    "CONTEXT_BEFORE",
    "CONTEXT_AFTER",
    "NO_DATA_MESSAGE",
    "NO_MATCH_MESSAGE",
]

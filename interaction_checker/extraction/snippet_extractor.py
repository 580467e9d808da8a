"""
Snippet extraction from unstructured label text.

Finds the first case-insensitive occurrence of a food term in label text and
returns a bounded excerpt around it.
"""

import re
from typing import Optional

# Characters kept before and after the match start
CONTEXT_BEFORE = 150
CONTEXT_AFTER = 300

ELLIPSIS = "..."

NO_DATA_MESSAGE = "No interaction data found."
NO_MATCH_MESSAGE = "No specific interaction found for this food."


class SnippetExtractor:
    """
    Heuristic excerpt locator.

    The search is case-insensitive but the excerpt is sliced from the
    original text, so label casing is preserved. Only the first occurrence
    is used.
    """

    def extract(self, full_text: Optional[str], food_term: str) -> str:
        """
        Extract the excerpt around the first mention of a food.

        Args:
            full_text: Combined label text (may be empty or None)
            food_term: Food to search for

        Returns:
            Excerpt ending in an ellipsis, or a fixed sentinel message

        Examples:
            >>> SnippetExtractor().extract("Avoid dairy products.", "DAIRY")
            'Avoid dairy products....'
            >>> SnippetExtractor().extract("", "grapefruit")
            'No interaction data found.'
        """
        if not full_text or not isinstance(full_text, str):
            return NO_DATA_MESSAGE

        # Match offsets index the original text; lower() can change its length
        match = re.search(re.escape(food_term), full_text, re.IGNORECASE)
        if match is None:
            return NO_MATCH_MESSAGE
        index = match.start()

        start = max(0, index - CONTEXT_BEFORE)
        end = min(len(full_text), index + CONTEXT_AFTER)

        return full_text[start:end] + ELLIPSIS

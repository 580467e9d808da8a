"""
Flattening of drug label records into one searchable text blob.

Label records are mappings of field name to either a string or a list of
strings (openFDA label sections are lists of paragraphs). Only those two
shapes are projected; nested objects such as the 'openfda' metadata block,
numbers and mixed lists are skipped.
"""

from typing import Any, Iterable, Iterator, List, Mapping, Union

LabelValue = Union[str, List[str]]
LabelRecord = Mapping[str, Any]

# Joins list elements and separates projected fields
SEPARATOR = " "


def is_text_field(value: Any) -> bool:
    """Check if a field value is one of the accepted text shapes."""
    if isinstance(value, str):
        return True
    return isinstance(value, list) and all(isinstance(item, str) for item in value)


def project_text_fields(record: LabelRecord) -> Iterator[str]:
    """
    Yield the text of every text-bearing field of one record, in field order.

    List fields are joined with a single space.
    """
    for value in record.values():
        if not is_text_field(value):
            continue
        if isinstance(value, str):
            yield value
        else:
            yield SEPARATOR.join(value)


def combine_label_text(records: Iterable[LabelRecord]) -> str:
    """
    Concatenate the text fields of all records into one blob.

    Every projected field is prefixed with a separator, so the blob starts
    with a space whenever at least one field was projected.
    """
    return "".join(
        SEPARATOR + text
        for record in records
        for text in project_text_fields(record)
    )

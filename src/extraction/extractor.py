"""Normalization of PDF form fields into a flat name/value mapping."""

import logging
from collections.abc import Sequence

from src.models.schemas import (
    UNSUPPORTED_FIELD_VALUE,
    ExtractedValue,
    ExtractionResult,
    FieldKind,
    FormField,
)

logger = logging.getLogger(__name__)

OFF_STATE = "Off"


def _strip_name(value: str) -> str:
    return value[1:] if value.startswith("/") else value


def _text_value(raw: str | list[str] | None) -> str:
    return raw if isinstance(raw, str) else ""


def _checkbox_value(raw: str | list[str] | None) -> bool:
    if not isinstance(raw, str):
        return False
    state = _strip_name(raw)
    return bool(state) and state != OFF_STATE


def _radio_value(raw: str | list[str] | None, options: list[str] | None) -> str:
    if not isinstance(raw, str):
        return ""
    selected = _strip_name(raw)
    if selected == OFF_STATE:
        return ""
    # States named "0", "1", ... index into /Opt when the group declares it
    if options and selected.isdigit() and int(selected) < len(options):
        return options[int(selected)]
    return selected


def _dropdown_value(raw: str | list[str] | None) -> str:
    if isinstance(raw, list):
        return raw[0] if raw else ""
    return raw or ""


def _multi_select_value(raw: str | list[str] | None) -> list[str]:
    if isinstance(raw, list):
        return list(raw)
    return [raw] if raw else []


def normalize_value(field: FormField) -> ExtractedValue:
    """Return the extracted value for one field according to its kind."""
    match field.kind:
        case FieldKind.TEXT:
            return _text_value(field.value)
        case FieldKind.CHECKBOX:
            return _checkbox_value(field.value)
        case FieldKind.RADIO_GROUP:
            return _radio_value(field.value, field.options)
        case FieldKind.DROPDOWN:
            return _dropdown_value(field.value)
        case FieldKind.MULTI_SELECT:
            return _multi_select_value(field.value)
        case _:
            return UNSUPPORTED_FIELD_VALUE


def extract_fields(fields: Sequence[FormField]) -> ExtractionResult:
    """Build the name/value mapping for a form.

    Field names are kept in input order, duplicates included. When a name
    repeats, the later field's value wins in ``data``.

    Args:
        fields: Form fields as listed by the reader.

    Returns:
        ExtractionResult with ``data`` and ``fields``.
    """
    data: dict[str, ExtractedValue] = {}
    names: list[str] = []

    for field in fields:
        names.append(field.name)
        data[field.name] = normalize_value(field)

    if len(data) != len(names):
        logger.debug(f"Form has {len(names) - len(data)} duplicate field name(s)")

    return ExtractionResult(data=data, fields=names)


def serialize_result(result: ExtractionResult) -> str:
    """Serialize a result as compact JSON: ``{"data": {...}, "fields": [...]}``."""
    return result.model_dump_json()

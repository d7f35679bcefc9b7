"""Decoding of raw provider settings payloads."""

from collections.abc import Mapping
from typing import Any, TypeVar

from pydantic import BaseModel

SettingsT = TypeVar("SettingsT", bound=BaseModel)


def parse_settings(model: type[SettingsT], data: Any) -> SettingsT:
    """Decode a provider settings payload into its private model.

    Args:
        model: Provider settings model (unknown keys are ignored).
        data: JSON object as str/bytes, a mapping, or None for no settings.

    Returns:
        The validated settings.

    Raises:
        pydantic.ValidationError: If the payload is not a JSON object or a
            field has the wrong type.
    """
    if data is None:
        return model()
    if isinstance(data, (str, bytes, bytearray)):
        return model.model_validate_json(data)
    if isinstance(data, Mapping):
        return model.model_validate(dict(data))
    return model.model_validate(data)

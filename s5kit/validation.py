"""Validation of command arguments and versioning flags."""

from __future__ import annotations

import json
from typing import Sequence

ALL_VERSIONS_FLAG_NAME = "all-versions"
VERSION_ID_FLAG_NAME = "version-id"
VERSIONING_NOT_SUPPORTED_WARNING = (
    "versioning related features are not supported with the given endpoint {!r}"
)


class ValidationError(ValueError):
    """Raised when command arguments or flags are invalid."""


def _quote(value: str) -> str:
    return json.dumps(value, ensure_ascii=False)


def check_versioning_url_remote(is_remote: bool, is_versioned: bool) -> None:
    """Reject versioning flags on local objects; versioning exists only remotely."""
    if not is_remote and is_versioned:
        raise ValidationError(
            f"{_quote(ALL_VERSIONS_FLAG_NAME)}, and {_quote(VERSION_ID_FLAG_NAME)} "
            "flags can only be used with remote objects"
        )


def check_versioning_flag_compatibility(all_versions: bool, version_id: str) -> None:
    """Reject asking for all versions and one specific version together."""
    if all_versions and version_id:
        raise ValidationError(
            f"it is not allowed to combine {_quote(ALL_VERSIONS_FLAG_NAME)} and "
            f"{_quote(VERSION_ID_FLAG_NAME)} flags"
        )


def check_number_of_arguments(args: Sequence[str], minimum: int, maximum: int) -> None:
    """Check the number of arguments; a negative maximum means no upper limit."""
    count = len(args)
    if minimum == 1 and maximum == 1 and count != 1:
        raise ValidationError("expected only one argument")
    if minimum == 2 and maximum == 2 and count != 2:
        raise ValidationError("expected source and destination arguments")
    quoted = "[" + " ".join(_quote(arg) for arg in args) + "]"
    if count < minimum:
        raise ValidationError(
            f"expected at least {minimum} arguments but was given {count}: {quoted}"
        )
    if maximum >= 0 and count > maximum:
        raise ValidationError(
            f"expected at most {minimum} arguments but was given {count}: {quoted}"
        )
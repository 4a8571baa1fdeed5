from collections.abc import Sequence
from enum import Enum

import httpx

JSON_MEDIA_TYPE = "application/json"


class Classification(Enum):
    SUCCESS = "success"
    STRUCTURED_ERROR = "structured_error"
    OPAQUE_ERROR = "opaque_error"
    CONTENT_TYPE_ERROR = "content_type_error"


def is_json_content_type(content_type: str | None) -> bool:
    if not content_type:
        return False
    media_type, _, _ = content_type.partition(";")
    return media_type.strip() == JSON_MEDIA_TYPE


def classify(status_code: int, content_types: Sequence[str]) -> Classification:
    """Decides how a response body must be interpreted.

    Only the first ``Content-Type`` value is considered, a missing header
    counts as not JSON.
    """
    is_json = is_json_content_type(content_types[0] if content_types else None)
    if status_code == httpx.codes.OK:
        return Classification.SUCCESS if is_json else Classification.CONTENT_TYPE_ERROR
    return Classification.STRUCTURED_ERROR if is_json else Classification.OPAQUE_ERROR


def status_line(status_code: int) -> str:
    return f"{status_code} {httpx.codes.get_reason_phrase(status_code)}"

"""Byte-stable JSON output for CLI reports.

Pydantic result models are dumped in JSON mode first, then serialized with
sorted keys and compact separators so the same result always produces the
same bytes.
"""

import json
from typing import Any

from pydantic import BaseModel


def canonical_dumps(obj: Any) -> str:
    """
    Serialize a result (pydantic model or plain JSON data) canonically.

    Rules:
    - Sorted keys
    - Separators (",", ":")
    - UTF-8 text (no ASCII escaping)
    - Lists keep their order (results are already canonically ordered)
    """
    if isinstance(obj, BaseModel):
        obj = obj.model_dump(mode="json")
    return json.dumps(
        obj,
        sort_keys=True,
        separators=(",", ":"),
        ensure_ascii=False,
    )

"""Parse ``gcloud container images list-tags --format=json`` output."""

from __future__ import annotations

import json

from shipit.core.result import Err, Ok, Result
from shipit.core.structured import as_obj_list, as_str_dict, get_str

from .errors import ImageTagParseFailed
from .model import ImageTagRecord

__all__ = ["parse_image_tags"]


def parse_image_tags(output: str) -> Result[list[ImageTagRecord], ImageTagParseFailed]:
    """Return records in registry order (newest first).

    Entries that are not objects, or have no usable ``digest``, become records
    with an empty digest so that retention counts still line up with the
    listing; cleanup skips them.
    """
    try:
        data: object = json.loads(output)
    except json.JSONDecodeError as e:
        return Err(ImageTagParseFailed(reason=str(e)))

    items = as_obj_list(data)
    if items is None:
        return Err(ImageTagParseFailed(reason="expected a JSON array"))

    records: list[ImageTagRecord] = []
    for item in items:
        entry = as_str_dict(item)
        digest = get_str(entry, "digest") if entry is not None else None
        records.append(ImageTagRecord(digest=digest or ""))
    return Ok(records)

# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.

"""Parsing of `op item get --format=json` output.

`op item get -` prints one JSON object per item it reads from stdin. With more
than one item the objects are printed back to back, separated only by
whitespace, with no enclosing array. A single item therefore parses to a dict,
and several items parse to a list of dicts; callers branch on the shape.
"""

import json
from typing import Any

from op_credentials.errors import MalformedOutput
from op_credentials.models import VaultCommandResult

_decoder = json.JSONDecoder()


def iter_json_objects(raw: str) -> list[dict[str, Any]]:
    """
    Decode every top-level JSON object in ``raw``, in source order.
    Text outside an object is skipped.
    """
    objects: list[dict[str, Any]] = []
    position = raw.find("{")
    while position != -1:
        try:
            obj, end = _decoder.raw_decode(raw, position)
        except json.JSONDecodeError as e:
            raise MalformedOutput(f"Invalid JSON in 1Password output at offset {position}: {e.msg}") from e
        objects.append(obj)
        position = raw.find("{", end)
    return objects


def parse_op_output(raw: str) -> VaultCommandResult:
    """
    Parse `op` output into a single record, or a list when it holds two or more.

    Raises:
        MalformedOutput: If no JSON object can be decoded.
    """
    objects = iter_json_objects(raw)
    if not objects:
        raise MalformedOutput("1Password output did not contain any JSON object")
    if len(objects) == 1:
        return objects[0]
    return objects

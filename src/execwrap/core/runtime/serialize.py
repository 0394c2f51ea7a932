from __future__ import annotations

import json
from typing import Any


def dumps_json(payload: Any) -> str:
    """Single-line, key-sorted JSON used for CLI payloads and log lines."""
    return json.dumps(payload, sort_keys=True)

from __future__ import annotations

import hashlib
import json
from typing import Any

from buildassets.models import BuildAssets


def canonical_json_bytes(obj: Any) -> bytes:
    return json.dumps(obj, sort_keys=True, separators=(",", ":"), ensure_ascii=False).encode(
        "utf-8"
    )


def sha256_bytes(data: bytes) -> str:
    return hashlib.sha256(data).hexdigest()


def manifest_digest(assets: BuildAssets) -> str:
    return sha256_bytes(canonical_json_bytes(assets.to_payload()))

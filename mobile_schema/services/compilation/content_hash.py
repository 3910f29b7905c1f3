"""
Content hash for cache invalidation.

The hash is a change-detection fingerprint, not an integrity check. The
default `rolling32` algorithm is collision-prone; switch
`content_hash_algorithm` to `sha256` where many schemas are
deduplicated by hash.
"""
import hashlib
import json
from typing import Any, Optional

from mobile_schema.config import settings


def canonical_json(content: Any) -> str:
    """Compact JSON with non-ASCII kept and key order preserved"""
    return json.dumps(content, separators=(",", ":"), ensure_ascii=False)


def rolling_hash32(text: str) -> str:
    """
    `hash = hash * 31 + unit` over UTF-16 code units, wrapped to signed 32-bit.

    Lone surrogates are hashed as the code units they are, so text cut in the
    middle of a surrogate pair still hashes.
    """
    data = text.encode("utf-16-le", "surrogatepass")
    value = 0
    for i in range(0, len(data), 2):
        unit = data[i] | (data[i + 1] << 8)
        value = (value * 31 + unit) & 0xFFFFFFFF
    if value >= 0x80000000:
        value -= 0x100000000
    return format(abs(value), "x").zfill(8)


def generate_content_hash(content: Any, algorithm: Optional[str] = None) -> str:
    """
    Fingerprint of a JSON-ready value.

    Args:
        content: Dict/list structure as it will be served
        algorithm: "rolling32" or "sha256"; defaults to settings

    Returns:
        Lower-case hex digest
    """
    text = canonical_json(content)
    algorithm = algorithm or settings.content_hash_algorithm

    if algorithm == "sha256":
        return hashlib.sha256(text.encode("utf-8", "surrogatepass")).hexdigest()
    if algorithm == "rolling32":
        return rolling_hash32(text)
    raise ValueError(f"Unsupported content hash algorithm: {algorithm}")

from __future__ import annotations

import re

_SECRET_PATTERNS: list[re.Pattern[str]] = [
    re.compile(
        r"\b(access_token|client_secret|code)\b(\"?\s*[:=]\s*\"?)[^\s&,\"]+",
        re.IGNORECASE,
    ),
]


def mask_secrets(text: str) -> str:
    """Replace token, secret and code values in URLs or JSON snippets before logging."""
    if not text:
        return text
    masked = text
    for pat in _SECRET_PATTERNS:
        masked = pat.sub(r"\1\2[REDACTED]", masked)
    if len(masked) > 500:
        masked = masked[:500] + "...[TRUNCATED]"
    return masked

import re
from typing import List, Optional

SPDX_LINE = re.compile(r"^\s*//\s*SPDX-License-Identifier:\s*(?P<identifier>\S+)")
PRAGMA_VERSION_LINE = re.compile(r"^\s*pragma\s+solidity\b")

# Noise that build tools print ahead of the flattened source
BANNER_LINES = (
    re.compile(r"^\s*//\s*Sources flattened with\b"),
    re.compile(r"^\s*\[dotenv@[^\]]*\]"),
    re.compile(r"^\s*◇\s*injected env"),
    re.compile(r"^\s*Compiling\b"),
    re.compile(r"^\s*Compiled \d+ Solidity files?\b"),
    re.compile(r"^\s*Nothing to compile\b"),
)


def _is_banner_line(line: str) -> bool:
    return any(pattern.match(line) for pattern in BANNER_LINES)


def _strip_banner(lines: List[str]) -> List[str]:
    """
    Drops the leading banner lines and the blank lines mixed in with them.
    Leaves the document untouched when it does not start with a banner.
    """
    index = 0
    banner_found = False
    while index < len(lines):
        line = lines[index]
        if _is_banner_line(line):
            banner_found = True
        elif line.strip():
            break
        index += 1

    if not banner_found:
        return lines
    return lines[index:]


def sanitize_source(source: str) -> str:
    """
    Cleans a flattened source document before upload.

    Removes the build tool banner and keeps only the first SPDX license
    identifier line and the first `pragma solidity` line. All other lines
    keep their order and line endings.
    """
    lines = _strip_banner(source.splitlines(keepends=True))

    seen_spdx = False
    seen_pragma = False
    cleaned = list()
    for line in lines:
        if SPDX_LINE.match(line):
            if seen_spdx:
                continue
            seen_spdx = True
        elif PRAGMA_VERSION_LINE.match(line):
            if seen_pragma:
                continue
            seen_pragma = True
        cleaned.append(line)

    return "".join(cleaned)


def spdx_identifier(source: str) -> Optional[str]:
    """Returns the first SPDX license identifier found in the source, if any."""
    for line in source.splitlines():
        match = SPDX_LINE.match(line)
        if match:
            return match.group("identifier")
    return None

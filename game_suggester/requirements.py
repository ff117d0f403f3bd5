"""
Best-effort extraction of minimum system requirements from the HTML-ish
text Steam puts in `pc_requirements` / `mac_requirements` / `linux_requirements`.

This is a heuristic over marketing copy, not a real hardware-sheet parser. Anything the
text doesn't clearly state comes back as None and is never held against a game.
"""
from __future__ import annotations
import html
import re
from typing import Dict, List, Optional, Tuple

from .models import HardwareProfile, ParsedRequirement

NUMBER = r"(\d+(?:[.,]\d+)?)"

# (pattern, factor to GB), tried in order, first hit wins
RAM_PATTERNS: List[Tuple[str, float]] = [
    (NUMBER + r"\s*gb\s*(?:of\s+)?ram\b", 1.0),
    (NUMBER + r"\s*mb\s*(?:of\s+)?ram\b", 1 / 1024),
]

VRAM_PATTERNS: List[Tuple[str, float]] = [
    (NUMBER + r"\s*gb\s*(?:of\s+)?(?:vram|video\s*ram|video\s*memory)\b", 1.0),
    (NUMBER + r"\s*mb\s*(?:of\s+)?(?:vram|video\s*ram|video\s*memory)\b", 1 / 1024),
]

STORAGE_PATTERNS: List[Tuple[str, float]] = [
    (NUMBER + r"\s*gb\s*(?:of\s+)?(?:available\s+)?(?:space|storage)\b", 1.0),
    (NUMBER + r"\s*mb\s*(?:of\s+)?(?:available\s+)?(?:space|storage)\b", 1 / 1024),
]

CORE_WORDS: Dict[str, int] = {
    r"\bdual[\s-]?core\b": 2,
    r"\bquad[\s-]?core\b": 4,
    r"\b(?:hexa|six)[\s-]?core\b": 6,
    r"\b(?:octa|eight)[\s-]?core\b": 8,
}
CORE_COUNT = r"\b(\d+)[\s-]?cores?\b"

CLOCK = NUMBER + r"\s*ghz\b"

# Model numbers are often glued on ("GeForce8800"), so no trailing \b
GPU_VENDOR_PATTERNS: Dict[str, str] = {
    "nvidia": r"\b(?:nvidia|geforce)(?![a-z])",
    "amd": r"\b(?:amd|radeon|ati)(?![a-z])",
    "intel": r"\bintel(?![a-z])",
}

# How far below a stated minimum we still call it a pass
RAM_TOLERANCE_GB = 0.25
CPU_TOLERANCE_GHZ = 0.1
VRAM_TOLERANCE_GB = 0.1
STORAGE_TOLERANCE_GB = 0.1

_BR = re.compile(r"<br\s*/?>", re.IGNORECASE)
_TAG = re.compile(r"<[^>]+>")


def normalize(raw: str) -> str:
    text = _BR.sub("\n", raw or "")
    text = _TAG.sub(" ", text)
    return html.unescape(text).lower()


def _to_float(token: str) -> float:
    return float(token.replace(",", "."))


def _first_amount(text: str, patterns: List[Tuple[str, float]]) -> Optional[float]:
    for pattern, factor in patterns:
        m = re.search(pattern, text)
        if m:
            return _to_float(m.group(1)) * factor
    return None


def _min_cores(text: str) -> Optional[int]:
    found = [n for pattern, n in CORE_WORDS.items() if re.search(pattern, text)]
    found += [int(m) for m in re.findall(CORE_COUNT, text)]
    return max(found) if found else None


def _min_clock(text: str) -> Optional[float]:
    m = re.search(CLOCK, text)
    return _to_float(m.group(1)) if m else None


def parse_requirements(raw: str) -> ParsedRequirement:
    """Never raises; unrecognisable text just yields an all-None result."""
    text = normalize(raw)
    if not text.strip():
        return ParsedRequirement()

    return ParsedRequirement(
        min_ram_gb=_first_amount(text, RAM_PATTERNS),
        min_vram_gb=_first_amount(text, VRAM_PATTERNS),
        min_storage_gb=_first_amount(text, STORAGE_PATTERNS),
        min_cores=_min_cores(text),
        min_cpu_ghz=_min_clock(text),
        gpu_vendors=frozenset(
            vendor for vendor, pattern in GPU_VENDOR_PATTERNS.items() if re.search(pattern, text)
        ),
    )


def _at_least(have: Optional[float], need: Optional[float], tolerance: float = 0.0) -> bool:
    if have is None or need is None:
        return True
    return have >= need - tolerance


def meets_requirements(parsed: ParsedRequirement, profile: HardwareProfile) -> bool:
    """
    True unless the profile clearly falls short of something the text states.
    A GPU vendor only counts when the text names exactly one vendor.
    """
    if not _at_least(profile.ram_gb, parsed.min_ram_gb, RAM_TOLERANCE_GB):
        return False
    if not _at_least(profile.cpu_ghz, parsed.min_cpu_ghz, CPU_TOLERANCE_GHZ):
        return False
    if not _at_least(profile.vram_gb, parsed.min_vram_gb, VRAM_TOLERANCE_GB):
        return False
    if not _at_least(profile.storage_gb, parsed.min_storage_gb, STORAGE_TOLERANCE_GB):
        return False
    if not _at_least(profile.cores, parsed.min_cores):
        return False

    if profile.gpu_vendor and len(parsed.gpu_vendors) == 1:
        return profile.gpu_vendor in parsed.gpu_vendors

    return True

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Dict, FrozenSet, Optional

STEAM_ICON_URL = "https://media.steampowered.com/steamcommunity/public/images/apps/{appid}/{icon}.jpg"

OS_CHOICES = ("windows", "mac", "linux")
GPU_VENDORS = ("nvidia", "amd", "intel")

# appdetails keys holding the requirements blocks for each OS
REQUIREMENTS_KEYS = {
    "windows": "pc_requirements",
    "mac": "mac_requirements",
    "linux": "linux_requirements",
}


@dataclass(frozen=True)
class Game:
    appid: int
    name: str
    playtime_forever: int = 0
    img_icon_url: Optional[str] = None
    playtime_windows_forever: Optional[int] = None
    playtime_mac_forever: Optional[int] = None
    playtime_linux_forever: Optional[int] = None
    rtime_last_played: int = 0  # 0 means never played

    @classmethod
    def from_api(cls, data: dict) -> "Game":
        """Build a Game from one entry of GetOwnedGames' `games` list."""
        return cls(
            appid=int(data["appid"]),
            name=data.get("name") or f"AppID {data['appid']}",
            playtime_forever=int(data.get("playtime_forever", 0) or 0),
            img_icon_url=data.get("img_icon_url") or None,
            playtime_windows_forever=data.get("playtime_windows_forever"),
            playtime_mac_forever=data.get("playtime_mac_forever"),
            playtime_linux_forever=data.get("playtime_linux_forever"),
            rtime_last_played=int(data.get("rtime_last_played", 0) or 0),
        )

    @property
    def icon_url(self) -> Optional[str]:
        if not self.img_icon_url:
            return None
        return STEAM_ICON_URL.format(appid=self.appid, icon=self.img_icon_url)

    @property
    def never_played(self) -> bool:
        return not self.rtime_last_played

    def to_dict(self) -> dict:
        out = {
            "appid": self.appid,
            "name": self.name,
            "playtime_forever": self.playtime_forever,
            "rtime_last_played": self.rtime_last_played,
            "never_played": self.never_played,
        }
        for key in ("playtime_windows_forever", "playtime_mac_forever", "playtime_linux_forever"):
            value = getattr(self, key)
            if value is not None:
                out[key] = value
        if self.img_icon_url:
            out["img_icon_url"] = self.img_icon_url
            out["icon_url"] = self.icon_url
        return out


@dataclass(frozen=True)
class HardwareProfile:
    """
    What the caller told us about their machine. Every field is optional and
    None means "don't check this dimension" (never zero, never False).
    """
    os: Optional[str] = None
    ram_gb: Optional[float] = None
    cores: Optional[int] = None
    cpu_ghz: Optional[float] = None
    gpu_vendor: Optional[str] = None
    vram_gb: Optional[float] = None
    storage_gb: Optional[float] = None

    def has_hardware(self) -> bool:
        return any(
            value is not None
            for value in (self.ram_gb, self.cores, self.cpu_ghz, self.gpu_vendor, self.vram_gb, self.storage_gb)
        )

    def wants_filtering(self) -> bool:
        return self.os is not None or self.has_hardware()


@dataclass(frozen=True)
class GameDetails:
    appid: int
    windows: bool = False
    mac: bool = False
    linux: bool = False
    # e.g. {"linux_requirements": {"minimum": "...", "recommended": "..."}}
    requirements: Dict[str, Dict[str, str]] = field(default_factory=dict)

    def supports(self, os_name: str) -> bool:
        return bool(getattr(self, os_name, False))

    def requirements_text(self, os_name: str) -> str:
        """Minimum requirements for the OS, or the recommended ones if no minimum is listed."""
        block = self.requirements.get(REQUIREMENTS_KEYS.get(os_name, ""), {})
        return block.get("minimum") or block.get("recommended") or ""


@dataclass(frozen=True)
class ParsedRequirement:
    min_ram_gb: Optional[float] = None
    min_vram_gb: Optional[float] = None
    min_storage_gb: Optional[float] = None
    min_cores: Optional[int] = None
    min_cpu_ghz: Optional[float] = None
    gpu_vendors: FrozenSet[str] = frozenset()


@dataclass(frozen=True)
class SuggestionResult:
    suggestion: Game
    filtered_by_os: bool
    requirements_checked: bool

    def to_dict(self) -> dict:
        return {
            "suggestion": self.suggestion.to_dict(),
            "filteredByOs": self.filtered_by_os,
            "requirementsChecked": self.requirements_checked,
        }

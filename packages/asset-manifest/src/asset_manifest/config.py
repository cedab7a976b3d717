from pathlib import Path
from typing import Literal, Optional, Tuple

from pydantic import BaseModel
from pydantic_settings import BaseSettings, SettingsConfigDict

from asset_manifest.components.scanner import PathStyle

ProfileName = Literal["public", "src-assets"]
LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]

CATEGORIES: Tuple[str, ...] = ("faces", "clothes", "etc")


class Profile(BaseModel):
    """Where assets live, what to skip, and how image paths are written."""

    name: str
    assets_dir: str
    output_file: str = "src/generated-assets.json"
    ignore_files: Tuple[str, ...] = (".DS_Store",)
    path_prefix: Optional[str] = None
    path_style: PathStyle = "relative"

    model_config = {"frozen": True}


PROFILES: dict[str, Profile] = {
    # Assets served from public/, values relative for GitHub Pages.
    "public": Profile(
        name="public",
        assets_dir="public",
        ignore_files=(
            ".DS_Store",
            "asset-manifest.json",
            "vite.svg",
            "templates",
            "sound",
        ),
    ),
    # Assets bundled from src/assets, values absolute from the site root.
    "src-assets": Profile(
        name="src-assets",
        assets_dir="src/assets",
        path_prefix="src/assets",
        path_style="web",
    ),
}


class Settings(BaseSettings):
    """Generator settings loaded from ASSET_MANIFEST_* environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="ASSET_MANIFEST_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    profile: ProfileName = "public"
    root: Path = Path(".")
    output_file: Optional[str] = None
    log_level: LogLevel = "INFO"

    def get_profile(self) -> Profile:
        profile = PROFILES[self.profile]
        if self.output_file is not None:
            profile = profile.model_copy(update={"output_file": self.output_file})
        return profile

    @property
    def output_path(self) -> Path:
        return self.root / self.get_profile().output_file

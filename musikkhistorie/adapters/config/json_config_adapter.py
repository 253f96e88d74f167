"""JSON file-based config adapter."""

import json
import os
import sys

from musikkhistorie import config
from musikkhistorie.domain.ports import ConfigPort

_DEFAULTS = {
    "asset_root": config.ASSET_ROOT,
    "simulation_mode": False,
    "log_level": config.LOG_LEVEL,
    "window_width": config.WINDOW_WIDTH,
    "window_height": config.WINDOW_HEIGHT,
    "window_resizable": True,
    "fullscreen": False,
}


def _config_dir() -> str:
    if getattr(sys, "frozen", False):
        return os.path.dirname(sys.executable)
    return os.getcwd()


class JsonConfigAdapter(ConfigPort):

    def __init__(self, path: str | None = None):
        self.path = path or os.path.join(_config_dir(), "config.json")

    def load(self) -> dict:
        cfg = dict(_DEFAULTS)
        if os.path.exists(self.path):
            with open(self.path, "r", encoding="utf-8") as f:
                cfg.update(json.load(f))
        return cfg

    def save(self, cfg: dict) -> None:
        with open(self.path, "w", encoding="utf-8") as f:
            json.dump(cfg, f, ensure_ascii=False, indent=2)

    def asset_root(self) -> str:
        """Asset root from config, relative paths resolved against the config directory."""
        root = str(self.load().get("asset_root") or config.ASSET_ROOT)
        if os.path.isabs(root):
            return root
        return os.path.join(os.path.dirname(os.path.abspath(self.path)), root)

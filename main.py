"""Entry point for Klassisk musikkhistorie: plays a random classical work to identify."""

import logging
import os
import sys

import pygame

from musikkhistorie.adapters.audio.pygame_adapter import PygameAudioAdapter
from musikkhistorie.adapters.audio.silent_adapter import SilentAudioAdapter
from musikkhistorie.adapters.config.json_config_adapter import JsonConfigAdapter
from musikkhistorie.config import SIMULATION_ENV_VAR
from musikkhistorie.domain.errors import AssetLoadError
from musikkhistorie.usecases.start_session import StartSessionUseCase


def _is_truthy(value: str) -> bool:
    return value.strip().lower() in {"1", "true", "yes", "on"}


def _log_level(value) -> int:
    """Map a level name from config to a logging level; unknown names fall back to INFO."""
    level = logging.getLevelName(str(value).strip().upper())
    if isinstance(level, int):
        return level
    print(f"Unknown log_level {value!r} in config.json, using INFO.")
    return logging.INFO


def main():
    config = JsonConfigAdapter()
    cfg = config.load()
    logging.basicConfig(
        level=_log_level(cfg.get("log_level", "INFO")),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    simulation = bool(cfg.get("simulation_mode")) or _is_truthy(os.environ.get(SIMULATION_ENV_VAR, ""))
    if simulation:
        print("Simulation mode: no sound will be played.")
        audio = SilentAudioAdapter()
    else:
        try:
            audio = PygameAudioAdapter()
        except pygame.error as e:
            print(f"Audio init failed: {e}")
            print("Set simulation_mode in config.json to run without a sound device.")
            sys.exit(1)

    asset_root = config.asset_root()
    print(f"Loading sounds from {asset_root}...")
    try:
        session = StartSessionUseCase(audio).execute(asset_root)
    except AssetLoadError as e:
        print(e)
        sys.exit(1)

    from musikkhistorie.ui.app import run_app

    run_app(session, cfg)


if __name__ == "__main__":
    main()

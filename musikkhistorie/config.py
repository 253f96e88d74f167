"""Configuration: window constants, asset layout and defaults."""

# Window
WINDOW_TITLE = "Klassisk musikkhistorie pugging"
WINDOW_WIDTH = 800
WINDOW_HEIGHT = 800

# Assets
ASSET_ROOT = "files"
ASSET_EXTENSION = ".mp3"

# Simulation mode plays nothing, only records triggers
SIMULATION_ENV_VAR = "MUSIKKHISTORIE_SIMULATION"

LOG_LEVEL = "INFO"

import json
import os
from datetime import datetime

DEFAULT_CONFIG_PATH = "config/runtime_config.json"

DEFAULT_CONFIG = {
    "max_steps": 1_000_000_000,
    "progress_interval": 1_000_000,
    "snapshot_radius": 10,
    "blank_symbol": "0",
    "log_results": True,
    "output_directory": "logs/",
    "log_file_prefix": "tm_run_"
}

# Expected types for validation
CONFIG_SCHEMA = {
    "max_steps": int,
    "progress_interval": (int, type(None)),
    "snapshot_radius": int,
    "blank_symbol": str,
    "log_results": bool,
    "output_directory": str,
    "log_file_prefix": str
}

def validate_config(config):
    for key, expected_type in CONFIG_SCHEMA.items():
        if key not in config:
            raise ValueError(f"Missing required configuration key: {key}")
        # bool is a subclass of int; reject it for numeric keys
        if isinstance(config[key], bool) and expected_type is not bool:
            raise TypeError(f"Config key '{key}' expected {expected_type}, got {type(config[key])}.")
        if not isinstance(config[key], expected_type):
            raise TypeError(f"Config key '{key}' expected {expected_type}, got {type(config[key])}.")

    if config["max_steps"] < 0:
        raise ValueError("max_steps must be non-negative.")
    if config["progress_interval"] is not None and config["progress_interval"] <= 0:
        raise ValueError("progress_interval must be a positive integer or null.")
    if config["snapshot_radius"] < 0:
        raise ValueError("snapshot_radius must be non-negative.")
    if len(config["blank_symbol"]) != 1:
        raise ValueError("blank_symbol must be exactly one character.")

def default_config():
    config = DEFAULT_CONFIG.copy()
    validate_config(config)
    return config

def load_config(path=DEFAULT_CONFIG_PATH, verbose=False):
    if not os.path.exists(path):
        raise FileNotFoundError(f"Configuration file not found at: {path}")

    with open(path, "r", encoding="utf-8") as f:
        user_config = json.load(f)

    # Merge defaults with overrides
    config = DEFAULT_CONFIG.copy()
    config.update(user_config)

    validate_config(config)

    if config["log_results"]:
        os.makedirs(config["output_directory"], exist_ok=True)

    if verbose:
        print(f"[{datetime.now()}] Loaded config:")
        for key, value in config.items():
            print(f"  {key}: {value}")

    return config

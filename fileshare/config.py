# config.py
# Settings come from DEFAULTS, overridden by environment variables of the same name.
# Relative paths are resolved against the working directory at startup.
import os

DEFAULTS = {
    "BASE_DIRECTORY": "files",
    "USERS_FILE": "users.json",
    "SECRET_KEY": "dev-secret-change-me",
    "HOST": "127.0.0.1",
    "PORT": "3000",
    "LOG_LEVEL": "INFO",
}
# SECRET_KEY is read from FLASK_SECRET, the rest from their own names
ENV_NAMES = {"SECRET_KEY": "FLASK_SECRET"}


def load_config(overrides=None) -> dict:
    config = {k: os.getenv(ENV_NAMES.get(k, k), v) for k, v in DEFAULTS.items()}
    if overrides:
        config.update(overrides)
    config["PORT"] = int(config["PORT"])
    config["LOG_LEVEL"] = str(config["LOG_LEVEL"]).upper()
    config["BASE_DIRECTORY"] = os.path.abspath(str(config["BASE_DIRECTORY"]))
    config["USERS_FILE"] = os.path.abspath(str(config["USERS_FILE"]))
    return config

# core/config.py

"""
Program-wide settings, read from the environment.

A `.env` file in the working directory is merged into the environment on import,
so local overrides never need to be exported by hand.
"""

import os

from dotenv import load_dotenv

load_dotenv()


class Config:
    # persistence
    DATA_FILE = os.path.expanduser(
        os.environ.get("TUTEEBOOK_DATA_FILE")
        or os.path.join("~", "Documents", "TuteeBook", "tutees.json")
    )

    # logging
    LOG_LEVEL = os.environ.get("TUTEEBOOK_LOG_LEVEL", "WARNING").upper()
    LOG_FILE = os.environ.get("TUTEEBOOK_LOG_FILE") or None
    LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"

    # cli
    PROMPT = "> "
    BANNER_WIDTH = 40

import os
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()

ROOT_DIR = Path(__file__).resolve().parent.parent


class Config:
    """App configuration settings"""

    # Shared admin PIN; empty means admin mode cannot be unlocked
    ADMIN_CODE = os.getenv('FP_ADMIN_CODE', '').strip()

    # Storage
    DATA_DIR = Path(os.getenv('FP_DATA_DIR', str(ROOT_DIR / 'data')))

    DEBUG = os.getenv('DEBUG', 'False').lower() == 'true'

    @classmethod
    def admin_enabled(cls) -> bool:
        return bool(cls.ADMIN_CODE)

"""
Firebase project configuration loaded from the environment.
"""

import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

ENV_FILE = ".env.local"

API_KEY_VAR = "VITE_FIREBASE_API_KEY"
AUTH_DOMAIN_VAR = "VITE_FIREBASE_AUTH_DOMAIN"
PROJECT_ID_VAR = "VITE_FIREBASE_PROJECT_ID"


@dataclass(frozen=True)
class FirebaseConfig:
    """Credentials and addressing for a Firebase web project."""

    api_key: Optional[str] = None
    auth_domain: Optional[str] = None
    project_id: Optional[str] = None

    @classmethod
    def from_env(cls, env_file: str = ENV_FILE) -> "FirebaseConfig":
        """
        Build a config from the process environment.

        Variables already set in the environment take precedence over the
        ones in env_file. Missing values are kept as None.

        Args:
            env_file: Path of the dotenv file to load first

        Returns:
            FirebaseConfig instance
        """
        load_dotenv(env_file)
        return cls(
            api_key=os.getenv(API_KEY_VAR),
            auth_domain=os.getenv(AUTH_DOMAIN_VAR),
            project_id=os.getenv(PROJECT_ID_VAR),
        )

"""
confgroups Environment Detection

Resolves the environment name whose override files are merged on top of
the base configuration groups.
"""

import os

from confgroups.config.constants import DEFAULT_ENVIRONMENT


def detect_environment() -> str:
    """Auto-detect environment from the process environment."""

    # Explicit environment variable
    if env := os.getenv("ENVIRONMENT"):
        return env.strip().lower()

    # Common application convention
    if env := os.getenv("APP_ENV"):
        return env.strip().lower()

    return DEFAULT_ENVIRONMENT

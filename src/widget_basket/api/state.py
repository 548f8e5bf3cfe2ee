"""Shared API state: the pricing configuration loaded once at startup."""
from ..config.settings import get_settings
from ..data.loader import load_config

settings = get_settings()
config = load_config(settings)

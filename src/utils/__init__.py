"""
Utility modules for the relay service
"""
from .config_loader import RelaySettings, load_settings

__all__ = [
    'RelaySettings',
    'load_settings',
]

from .logging_setup import setup_logging
from .settings import DentistFinderSettings, load_settings

__all__ = [
    'setup_logging',
    'DentistFinderSettings',
    'load_settings',
]

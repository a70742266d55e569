"""skysync — keep localization string files in sync with OneSky."""

__version__ = "0.3.0"

"""HTTP contracts of the localization module."""

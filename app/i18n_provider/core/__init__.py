"""Core configuration and logging for the i18n provider."""

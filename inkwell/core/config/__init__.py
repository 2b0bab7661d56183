"""Settings mixins composed into :class:`inkwell.core.config.settings.Settings`."""

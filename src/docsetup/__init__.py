"""Bootstrap ember-cli-addon-docs in an addon's test app."""

__version__ = "0.1.0"

"""ReloadLog: hand-loading session records with dependent taxonomy selection."""

__version__ = "0.1.0"

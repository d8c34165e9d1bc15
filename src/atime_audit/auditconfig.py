from __future__ import annotations

import logging
import os
from configparser import ConfigParser

NEW_CONFIG = """\
[system]
# config_name is used to name output files.
config_name = {config_name}

[audit]
# The directory to report access times for.
root_directory = .
# Descend into subdirectories.
recursive = false

[emit]
# Emit access time lines to the following destinations.
stdout = true
file = false
# Optional output file. Defaults to <config_name>_<date>_access_times.txt
output_file =

    """


class AuditConfig:
    """Configuration for the Auditor."""

    logger = logging.getLogger("atime_audit.AuditConfig")

    def __init__(self, filepath: str | None = None) -> None:
        """
        Load the configuration from the given file.

        With no filepath every option uses its default.
        """
        self._config = ConfigParser()

        if filepath is None:
            self.logger.debug("No config file given, using defaults")
            return

        success = self._config.read(filepath)

        if not success:
            raise ValueError(f"Could not read config file at {filepath}")

        self.logger.debug("Loaded config from %s", filepath)

    def override(
        self,
        *,
        root_directory: str | None = None,
        recursive: bool | None = None,
    ) -> None:
        """Replace loaded values with the given ones. None leaves a value as is."""
        if not self._config.has_section("audit"):
            self._config.add_section("audit")

        if root_directory is not None:
            self._config.set("audit", "root_directory", root_directory)

        if recursive is not None:
            self._config.set("audit", "recursive", "true" if recursive else "false")

    @property
    def config_name(self) -> str:
        """Return the name of the config."""
        return self._config.get("system", "config_name", fallback="atime_audit")

    @property
    def root_directory(self) -> str:
        """Return the directory to audit, the working directory if not set."""
        return self._config.get("audit", "root_directory", fallback=".") or "."

    @property
    def recursive(self) -> bool:
        """Return whether to descend into subdirectories."""
        return self._config.getboolean("audit", "recursive", fallback=False)

    @property
    def emit_stdout(self) -> bool:
        """Return whether to emit lines to stdout."""
        return self._config.getboolean("emit", "stdout", fallback=True)

    @property
    def emit_file(self) -> bool:
        """Return whether to emit lines to a file."""
        return self._config.getboolean("emit", "file", fallback=False)

    @property
    def output_file(self) -> str | None:
        """Return the file to emit lines to, None to use a dated default."""
        return self._config.get("emit", "output_file", fallback=None) or None


def write_new_config(filename: str) -> None:
    """Write a new config file if one does not exist."""
    if os.path.exists(filename):
        return

    config_name = os.path.splitext(os.path.basename(filename))[0]
    config = NEW_CONFIG.format(config_name=config_name)

    with open(filename, "w") as config_file:
        config_file.write(config)

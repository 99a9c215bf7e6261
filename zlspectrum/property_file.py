"""Persistence of interface settings in a per-user XML file."""

from __future__ import annotations

import os
import shutil
import sys
import threading
import xml.etree.ElementTree as ET
from collections.abc import Mapping, MutableMapping
from pathlib import Path


def _user_application_data_dir() -> Path:
    """The per-user directory where applications keep their settings."""
    if sys.platform.startswith("win"):
        appdata = os.environ.get("APPDATA")
        if appdata:
            return Path(appdata)
        return Path.home() / "AppData" / "Roaming"
    if sys.platform == "darwin":
        return Path.home() / "Library"
    return Path.home() / ".config"


class PropertyFile:
    """Loads and saves parameter values to ``ui.xml`` in a per-user folder.

    A file left by older versions under ``Audio/Presets/<manufacturer>`` is
    moved to the current location the first time it is needed.
    """

    def __init__(self, state: MutableMapping[str, float] | None = None, *,
                 base_dir: str | os.PathLike[str] | None = None,
                 manufacturer: str = "ZL",
                 plugin_name: str = "ZL Spectrum Equalizer",
                 root_tag: str = "PARAMETERS") -> None:
        base = Path(base_dir) if base_dir is not None else _user_application_data_dir()
        self.old_path = base / "Audio" / "Presets" / manufacturer / plugin_name
        self.old_ui_path = self.old_path / "ui.xml"
        self.path = base / "ZL Audio" / plugin_name
        self.ui_path = self.path / "ui.xml"
        self.root_tag = root_tag
        self._lock = threading.Lock()
        if state is not None:
            self.load(state)

    def load(self, state: MutableMapping[str, float]) -> None:
        """Overwrite the values in ``state`` with those stored in the file.

        Ids the file holds but ``state`` does not are ignored; an empty or
        malformed file leaves ``state`` unchanged.
        """
        with self._lock:
            if not self._check_create_directory():
                return
            try:
                root = ET.parse(self.ui_path).getroot()
            except (ET.ParseError, OSError):
                return
            for element in root:
                key = element.get("id")
                raw = element.get("value")
                if key is None or raw is None or key not in state:
                    continue
                try:
                    state[key] = float(raw)
                except ValueError:
                    continue

    def save(self, state: Mapping[str, float]) -> None:
        """Write every value of ``state`` to the file."""
        with self._lock:
            if not self._check_create_directory():
                return
            root = ET.Element(self.root_tag)
            for key, value in state.items():
                ET.SubElement(root, "PARAM", id=key, value=repr(float(value)))
            ET.indent(root)
            try:
                ET.ElementTree(root).write(self.ui_path, encoding="UTF-8", xml_declaration=True)
            except OSError:
                return

    def _check_create_directory(self) -> bool:
        try:
            self.path.mkdir(parents=True, exist_ok=True)
        except OSError:
            return False
        if self.ui_path.is_file():
            return True
        if self.old_ui_path.is_file():
            try:
                shutil.copyfile(self.old_ui_path, self.ui_path)
                self.old_ui_path.unlink()
                return True
            except OSError:
                pass
        try:
            self.ui_path.touch()
        except OSError:
            return False
        return True
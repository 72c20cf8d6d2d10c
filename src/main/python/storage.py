# SPDX-License-Identifier: GPL-2.0-or-later
"""Settings persistence for the binding UI (type-to-bind and friends)."""
from qtpy.QtCore import QSettings

_settings = QSettings("Tapbind", "Tapbind")


def get(key, default=None):
    return _settings.value(key, default)


def get_bool(key, default=False):
    value = get(key, default)
    # some QSettings backends hand back strings
    if isinstance(value, str):
        return value.lower() in ("true", "1", "yes")
    return bool(value)


def set(key, value):
    _settings.setValue(key, value)

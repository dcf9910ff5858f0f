from __future__ import annotations


class PrefsLoadError(Exception):
    """The prefs file exists but could not be turned into a document."""


class CorruptPrefsFileError(PrefsLoadError):
    """The prefs file is not a JSON object."""


class UnsupportedValueError(ValueError):
    """A value is not one of the supported scalar kinds (float, int, string)."""

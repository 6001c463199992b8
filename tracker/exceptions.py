# tracker/exceptions.py


class RecordNotFound(Exception):
    """Requested row is absent or soft-deleted."""


class SettingTypeError(Exception):
    """A setting was read as a type other than the one it declares."""

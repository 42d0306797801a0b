from datetime import datetime
from functools import wraps

DEFAULT_SETTINGS = {
    "RELATIVE_BASE": None,
    "LANGUAGE": None,
    "FALLBACK": True,
    "WORKING_HOURS": (9, 18),
    "LUNCH_BREAK": (12, 13),
    "SLOT_STEP_MINUTES": 60,
}

SUPPORTED_LANGUAGES = ("en", "zh", "ja", "ko")


class SettingValidationError(ValueError):
    pass


class Settings:
    """Control and configure default parsing behavior of schedparser.

    * `RELATIVE_BASE` reference instant used when a call passes none.
    * `LANGUAGE` language code forced instead of character-class detection.
    * `FALLBACK` invoke the fallback delegate when the patterns fail.
    * `WORKING_HOURS`, `LUNCH_BREAK`, `SLOT_STEP_MINUTES` slot recommender.
    """

    _default = True

    def __init__(self, settings=None):
        self._updateall(DEFAULT_SETTINGS.items())
        if settings:
            self._updateall(settings.items())

    def _updateall(self, iterable):
        for key, value in iterable:
            setattr(self, key, value)

    def as_dict(self):
        return {key: getattr(self, key) for key in DEFAULT_SETTINGS}

    def replace(self, mod_settings=None, **kwds):
        for k, v in kwds.items():
            if v is None:
                raise TypeError('Invalid {{"{}": {}}}'.format(k, v))

        for x in self.as_dict():
            kwds.setdefault(x, getattr(self, x))

        if mod_settings:
            kwds.update(mod_settings)

        new_settings = Settings(kwds)
        new_settings._default = kwds == DEFAULT_SETTINGS
        return new_settings

    def __repr__(self):
        return "Settings(%r)" % self.as_dict()


settings = Settings()


def apply_settings(f):
    @wraps(f)
    def wrapper(*args, **kwargs):
        mod_settings = kwargs.get("settings")
        if mod_settings is None:
            kwargs["settings"] = settings
        elif isinstance(mod_settings, dict):
            kwargs["settings"] = settings.replace(mod_settings=mod_settings)
        elif not isinstance(mod_settings, Settings):
            raise TypeError(
                "settings can only be either dict or instance of Settings class"
            )

        check_settings(kwargs["settings"])
        return f(*args, **kwargs)

    return wrapper


def _check_hour_pair(setting_name, value):
    if (
        not isinstance(value, (tuple, list))
        or len(value) != 2
        or not all(isinstance(v, int) for v in value)
    ):
        raise SettingValidationError(
            '"{}" must be a pair of integer hours, not {!r}'.format(setting_name, value)
        )
    start, end = value
    if not 0 <= start < end <= 24:
        raise SettingValidationError(
            '"{}" must satisfy 0 <= start < end <= 24, not {!r}'.format(
                setting_name, value
            )
        )


def check_settings(settings):
    """Check if provided settings are valid, if not it raises `SettingValidationError`."""
    relative_base = settings.RELATIVE_BASE
    if relative_base is not None and not isinstance(relative_base, datetime):
        raise SettingValidationError(
            '"RELATIVE_BASE" must be a datetime, not {!r}'.format(relative_base)
        )

    language = settings.LANGUAGE
    if language is not None and language not in SUPPORTED_LANGUAGES:
        raise SettingValidationError(
            '"LANGUAGE" must be one of {}, not {!r}'.format(
                ", ".join(SUPPORTED_LANGUAGES), language
            )
        )

    if not isinstance(settings.FALLBACK, bool):
        raise SettingValidationError('"FALLBACK" must be a boolean')

    _check_hour_pair("WORKING_HOURS", settings.WORKING_HOURS)
    _check_hour_pair("LUNCH_BREAK", settings.LUNCH_BREAK)

    step = settings.SLOT_STEP_MINUTES
    if not isinstance(step, int) or isinstance(step, bool) or step <= 0:
        raise SettingValidationError(
            '"SLOT_STEP_MINUTES" must be a positive integer, not {!r}'.format(step)
        )

from copy import deepcopy
from functools import wraps

from dateutil import tz

default_settings = {
    "SEPARATOR": " \N{EN DASH} ",
    "REMOVABLE_DELIMITERS": "/-.",
    "TIMEZONE": None,
    "ESCAPE_AWARE_STRIPPING": False,
}


class SettingValidationError(ValueError):
    pass


class Settings:
    """Control and configure default range formatting behavior.

    Currently supported settings:

    * `SEPARATOR`: text placed between the start and end renderings.
    * `REMOVABLE_DELIMITERS`: characters trimmed from the ends of a format
      once time parts have been consolidated.
    * `TIMEZONE`: zone used for naive ``datetime``/``date`` values. ``None``
      means the machine's local zone.
    * `ESCAPE_AWARE_STRIPPING`: keep escaped occurrences of a time part
      character when removing it from a format.
    """

    _default = True

    def __init__(self, settings=None):
        self._updateall(default_settings.items())
        if settings:
            self._updateall(settings.items())

    def replace(self, mod_settings=None, **kwds):
        for k, v in kwds.items():
            if v is None:
                raise TypeError('Invalid {{"{}": {}}}'.format(k, v))

        for x in default_settings:
            kwds.setdefault(x, getattr(self, x))

        if mod_settings:
            kwds.update(mod_settings)

        new_settings = Settings(kwds)
        new_settings._default = False
        return new_settings

    def _updateall(self, iterable):
        for key, value in iterable:
            setattr(self, key, value)

    def as_dict(self):
        return {key: deepcopy(getattr(self, key)) for key in default_settings}


settings = Settings()


def apply_settings(f):
    @wraps(f)
    def wrapper(*args, **kwargs):
        mod_settings = kwargs.get("settings")

        kwargs["settings"] = mod_settings or settings

        if isinstance(kwargs["settings"], dict):
            check_settings(kwargs["settings"])
            kwargs["settings"] = settings.replace(mod_settings=mod_settings)

        if not isinstance(kwargs["settings"], Settings):
            raise TypeError(
                "settings can only be either dict or instance of Settings class"
            )

        return f(*args, **kwargs)

    return wrapper


def _check_timezone(setting_name, setting_value):
    if setting_value is None or "local" in setting_value.lower():
        return
    if tz.gettz(setting_value) is None:
        raise SettingValidationError(
            '"{}" is not a valid value for "{}", it should be a timezone name '
            "such as 'Europe/London' or 'UTC'".format(setting_value, setting_name)
        )


def check_settings(settings):
    """
    Check if provided settings are valid, if not it raises `SettingValidationError`.
    Only checks for the modified settings.
    """
    settings_values = {
        "SEPARATOR": {
            "type": str,
        },
        "REMOVABLE_DELIMITERS": {
            "type": str,
        },
        "TIMEZONE": {
            "type": (str, type(None)),
            "extra_check": _check_timezone,
        },
        "ESCAPE_AWARE_STRIPPING": {
            "type": bool,
        },
    }

    if isinstance(settings, Settings):
        modified_settings = settings.as_dict()
    else:
        modified_settings = settings

    for setting_name, setting_value in modified_settings.items():
        if setting_name not in settings_values:
            raise SettingValidationError(
                '"{}" is not a valid setting'.format(setting_name)
            )

        setting_type = settings_values[setting_name]["type"]
        if not isinstance(setting_value, setting_type):
            raise SettingValidationError(
                '"{}" must be "{}", not "{}".'.format(
                    setting_name,
                    getattr(setting_type, "__name__", setting_type),
                    type(setting_value).__name__,
                )
            )

        extra_check = settings_values[setting_name].get("extra_check")
        if extra_check:
            extra_check(setting_name, setting_value)

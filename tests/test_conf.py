import pytest

from daterange.conf import (
    Settings,
    SettingValidationError,
    apply_settings,
    check_settings,
    settings,
)


@apply_settings
def echo_settings(settings=None):
    return settings


class TestSettings:
    def test_defaults(self):
        assert settings.SEPARATOR == " \N{EN DASH} "
        assert settings.REMOVABLE_DELIMITERS == "/-."
        assert settings.TIMEZONE is None
        assert settings.ESCAPE_AWARE_STRIPPING is False
        assert settings._default

    def test_replace_leaves_defaults_untouched(self):
        modified = settings.replace(mod_settings={"SEPARATOR": " to "})
        assert modified.SEPARATOR == " to "
        assert modified.REMOVABLE_DELIMITERS == "/-."
        assert not modified._default
        assert settings.SEPARATOR == " \N{EN DASH} "

    def test_replace_rejects_none(self):
        with pytest.raises(TypeError):
            settings.replace(SEPARATOR=None)


class TestApplySettings:
    def test_default_settings(self):
        assert echo_settings() is settings

    def test_dict(self):
        result = echo_settings(settings={"TIMEZONE": "UTC"})
        assert isinstance(result, Settings)
        assert result.TIMEZONE == "UTC"

    def test_settings_instance(self):
        custom = Settings({"SEPARATOR": "|"})
        assert echo_settings(settings=custom) is custom

    def test_invalid_type(self):
        with pytest.raises(TypeError):
            echo_settings(settings=["SEPARATOR"])


class TestCheckSettings:
    @pytest.mark.parametrize("mod_settings", [
        {"SEPARATOR": " to "},
        {"REMOVABLE_DELIMITERS": "~"},
        {"TIMEZONE": None},
        {"TIMEZONE": "Europe/London"},
        {"ESCAPE_AWARE_STRIPPING": True},
    ])
    def test_valid(self, mod_settings):
        check_settings(mod_settings)

    def test_unknown_setting(self):
        with pytest.raises(SettingValidationError, match="is not a valid setting"):
            check_settings({"SEPERATOR": " to "})

    @pytest.mark.parametrize("mod_settings", [
        {"SEPARATOR": 1},
        {"REMOVABLE_DELIMITERS": ["/"]},
        {"ESCAPE_AWARE_STRIPPING": "yes"},
        {"TIMEZONE": 0},
    ])
    def test_wrong_type(self, mod_settings):
        with pytest.raises(SettingValidationError):
            check_settings(mod_settings)

    def test_unknown_timezone(self):
        with pytest.raises(SettingValidationError, match="timezone"):
            check_settings({"TIMEZONE": "Mars/Olympus_Mons"})

    def test_settings_instance(self):
        check_settings(settings)

    def test_is_value_error(self):
        assert issubclass(SettingValidationError, ValueError)

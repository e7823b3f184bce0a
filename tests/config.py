from mock import patch
from pytest import raises

from unparse import Config, default_config
from unparse.platform import quote_posix_if_needed, quote_windows_if_needed


class Config_:
    class class_attrs:
        class posix_defaults:
            def uses_dashes_and_equals(self):
                defaults = Config.posix_defaults()
                assert defaults["short_option_delimiter"] == "-"
                assert defaults["long_option_delimiter"] == "--"
                assert defaults["option_argument_delimiter"] == " "
                assert defaults["option_optional_argument_delimiter"] == "="

            def combines_short_options(self):
                defaults = Config.posix_defaults()
                assert defaults["disable_combining_short_options"] is False
                assert defaults["disable_short_name"] is False

            def quotes_posix_style(self):
                quoter = Config.posix_defaults()["argument_quoter"]
                assert quoter is quote_posix_if_needed

            def has_no_terminator(self):
                assert Config.posix_defaults()["options_terminator"] == ""

        class windows_defaults:
            def uses_slashes_and_colons(self):
                defaults = Config.windows_defaults()
                assert defaults["short_option_delimiter"] == "/"
                assert defaults["long_option_delimiter"] == "/"
                assert defaults["option_argument_delimiter"] == " "
                assert defaults["option_optional_argument_delimiter"] == ":"

            def does_not_combine_short_options(self):
                defaults = Config.windows_defaults()
                assert defaults["disable_combining_short_options"] is True

            def quotes_windows_style(self):
                quoter = Config.windows_defaults()["argument_quoter"]
                assert quoter is quote_windows_if_needed

        class platform_defaults:
            def selects_by_name(self):
                assert Config.platform_defaults("posix") == (
                    Config.posix_defaults()
                )
                assert Config.platform_defaults("windows") == (
                    Config.windows_defaults()
                )

            def rejects_unknown_platforms(self):
                with raises(ValueError) as info:
                    Config.platform_defaults("beos")
                assert "beos" in str(info.value)

    class init:
        "__init__"

        def accepts_explicit_platform(self):
            config = Config("windows")
            assert config.platform == "windows"
            assert config.short_option_delimiter == "/"

        @patch("unparse.config.WINDOWS", False)
        def defaults_to_posix_off_windows(self):
            assert Config().platform == "posix"

        @patch("unparse.config.WINDOWS", True)
        def defaults_to_windows_on_windows(self):
            config = Config()
            assert config.platform == "windows"
            assert config.long_option_delimiter == "/"

        def rejects_unknown_platforms(self):
            with raises(ValueError):
                Config("beos")

        def applies_overrides(self):
            config = Config("posix", options_terminator="--")
            assert config.options_terminator == "--"
            assert config.short_option_delimiter == "-"

        def rejects_unknown_settings(self):
            with raises(TypeError) as info:
                Config("posix", short_delimiter="+")
            assert "short_delimiter" in str(info.value)

        def None_keeps_default(self):
            config = Config("posix", disable_short_name=None)
            assert config.disable_short_name is False

        def empty_delimiters_keep_default(self):
            config = Config(
                "windows",
                short_option_delimiter="",
                long_option_delimiter="",
                option_argument_delimiter="",
                option_optional_argument_delimiter="",
            )
            assert config == Config("windows")

        def empty_terminator_is_honored(self):
            config = Config("posix", options_terminator="")
            assert config.options_terminator == ""

        def false_quoter_is_kept(self):
            assert Config("posix", argument_quoter=False).argument_quoter is (
                False
            )

    class aliases:
        def disable_short_option_sets_disable_short_name(self):
            config = Config("posix", disable_short_option=True)
            assert config.disable_short_name is True
            assert config.disable_short_option is True

        def name_value_delimiter_sets_optional_delimiter(self):
            config = Config("posix", name_value_delimiter=":")
            assert config.option_optional_argument_delimiter == ":"
            assert config["name_value_delimiter"] == ":"

        def aliases_are_contained(self):
            assert "name_value_delimiter" in Config("posix")

    class access:
        def attribute_and_item_syntax_agree(self):
            config = Config("posix")
            assert config["long_option_delimiter"] == (
                config.long_option_delimiter
            )

        def unknown_attributes_raise_AttributeError(self):
            with raises(AttributeError):
                Config("posix").nope

        def unknown_items_raise_KeyError(self):
            with raises(KeyError):
                Config("posix")["nope"]

        def is_read_only(self):
            config = Config("posix")
            with raises(AttributeError) as info:
                config.options_terminator = "--"
            assert "clone" in str(info.value)
            assert config.options_terminator == ""

        def equality_compares_settings(self):
            assert Config("posix") == Config("posix")
            assert Config("posix") != Config("windows")
            assert Config("posix") != Config("posix", options_terminator="--")

        def repr_shows_platform_and_overrides(self):
            config = Config("posix", options_terminator="--")
            assert repr(config) == (
                "<Config: posix {'options_terminator': '--'}>"
            )

    class clone:
        def returns_new_equal_config(self):
            config = Config("windows", options_terminator="--")
            clone = config.clone()
            assert clone is not config
            assert clone == config
            assert clone.platform == "windows"

        def applies_new_overrides_on_top(self):
            config = Config("posix", options_terminator="--")
            clone = config.clone(disable_short_name=True)
            assert clone.options_terminator == "--"
            assert clone.disable_short_name is True
            assert config.disable_short_name is False

        def accepts_aliases(self):
            config = Config("posix", name_value_delimiter=":")
            clone = config.clone(option_optional_argument_delimiter="+")
            assert clone.option_optional_argument_delimiter == "+"

        def None_keeps_current_value(self):
            config = Config("posix", options_terminator="--")
            clone = config.clone(options_terminator=None)
            assert clone.options_terminator == "--"
            assert clone.clone(disable_short_name=None) == config

        def None_still_validates_names(self):
            with raises(TypeError):
                Config("posix").clone(nope=None)

    class quote:
        def uses_argument_quoter(self):
            config = Config("posix", argument_quoter=lambda s: "<" + s + ">")
            assert config.quote("x") == "<x>"

        def uses_platform_quoter_by_default(self):
            assert Config("posix").quote("a b") == '"a b"'
            assert Config("windows").quote("a b") == '"a b"'

        def passes_values_through_when_disabled(self):
            config = Config("posix", argument_quoter=False)
            assert config.quote("a b") == "a b"


class default_config_:
    def returns_platform_defaults(self):
        assert default_config() == Config()

    def returns_fresh_objects(self):
        assert default_config() is not default_config()

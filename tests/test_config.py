from codegen.core.config import DEFAULT_INDENT, DEFAULT_LINE_BREAK, Settings


def test_settings_fields():
    assert set(Settings.model_fields) == {
        "app_name",
        "log_level",
        "log_snippet_lookups",
        "line_break",
        "indent",
        "load_defaults",
    }


def test_settings_defaults():
    settings = Settings()
    assert settings.line_break == DEFAULT_LINE_BREAK
    assert settings.indent == DEFAULT_INDENT
    assert settings.load_defaults is True
    assert settings.log_snippet_lookups is False

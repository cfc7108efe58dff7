import logging

from srcfmt_cli.config import FormatConfig


def test_defaults_without_file(tmp_path):
    config = FormatConfig(tmp_path / ".srcfmt.toml")
    assert config.indent_size == 4
    assert config.use_tabs is True
    assert config.continuation_indent == 2
    assert config.max_blank_lines == 1
    assert config.backup is False


def test_load_from_file(tmp_path):
    path = tmp_path / ".srcfmt.toml"
    path.write_text(
        "[tool.srcfmt]\n"
        "indent_size = 2\n"
        "use_tabs = false\n"
        "max_blank_lines = 2\n"
        "backup = true\n"
    )

    config = FormatConfig(path)
    formatter_config = config.formatter_config()

    assert config.backup is True
    assert formatter_config.indent_size == 2
    assert formatter_config.use_tabs is False
    assert formatter_config.max_blank_lines == 2
    assert formatter_config.continuation_indent == 2
    assert formatter_config.indent_unit == "  "


def test_other_tables_ignored(tmp_path):
    path = tmp_path / ".srcfmt.toml"
    path.write_text("[tool.other]\nindent_size = 8\n")
    assert FormatConfig(path).indent_size == 4


def test_malformed_file_falls_back(tmp_path, caplog):
    path = tmp_path / ".srcfmt.toml"
    path.write_text("[tool.srcfmt\nindent_size = ")

    with caplog.at_level(logging.WARNING):
        config = FormatConfig(path)

    assert config.indent_size == 4
    assert "Ignoring config file" in caplog.text


def test_bad_value_falls_back(tmp_path, caplog):
    path = tmp_path / ".srcfmt.toml"
    path.write_text('[tool.srcfmt]\nindent_size = "wide"\nuse_tabs = false\n')

    with caplog.at_level(logging.WARNING):
        config = FormatConfig(path)

    assert config.indent_size == 4
    assert config.use_tabs is True
    assert "Ignoring config file" in caplog.text

"""Unit tests for HtmlOptions defaults, validation and cloning."""

from dataclasses import FrozenInstanceError, fields

import pytest

from htmlmark.options import HtmlOptions


@pytest.mark.unit
class TestHtmlOptionsDefaults:
    """Test default values."""

    def test_defaults(self):
        options = HtmlOptions()
        assert options.autolinks is True
        assert options.bullets == "*+-"
        assert options.code_language == ""
        assert options.code_language_callback is None
        assert options.convert is None
        assert options.strip is None
        assert options.default_title is False
        assert options.strip_link_titles is True
        assert options.escape_asterisks is True
        assert options.escape_underscores is True
        assert options.escape_misc is False
        assert options.heading_style == "underlined"
        assert options.keep_inline_images_in == ()
        assert options.newline_style == "spaces"
        assert options.normalize_newlines is True
        assert options.strip_document == "lstrip"
        assert options.strong_em_symbol == "*"
        assert options.sub_symbol == ""
        assert options.sup_symbol == ""
        assert options.table_infer_header is True
        assert options.deduplicate_headings is True
        assert options.wrap is False
        assert options.wrap_width == 80
        assert options.html_parser == "html.parser"

    def test_every_field_has_help(self):
        for option_field in fields(HtmlOptions):
            assert option_field.metadata.get("help"), option_field.name


@pytest.mark.unit
class TestHtmlOptionsValidation:
    """Test __post_init__ validation."""

    @pytest.mark.parametrize(
        "kwargs",
        [
            {"heading_style": "setext"},
            {"newline_style": "crlf"},
            {"strong_em_symbol": "-"},
            {"strip_document": "both"},
            {"html_parser": "xml"},
            {"bullets": ""},
            {"wrap_width": 0},
            {"wrap_width": -5},
            {"wrap_width": "80"},
            {"wrap_width": True},
            {"bullets": 5},
            {"code_language": None},
            {"sub_symbol": 1},
            {"code_language_callback": "python"},
            {"strip": "a"},
        ],
    )
    def test_invalid_values_raise(self, kwargs):
        with pytest.raises(ValueError):
            HtmlOptions(**kwargs)

    def test_strip_document_accepts_none(self):
        assert HtmlOptions(strip_document=None).strip_document is None

    def test_tag_lists_normalized_to_lowercase_tuples(self):
        options = HtmlOptions(convert=["A", "IMG"], strip=["Span"], keep_inline_images_in=["TD"])
        assert options.convert == ("a", "img")
        assert options.strip == ("span",)
        assert options.keep_inline_images_in == ("td",)

    def test_empty_convert_list_is_kept(self):
        assert HtmlOptions(convert=[]).convert == ()


@pytest.mark.unit
class TestHtmlOptionsCloning:
    """Test immutability and create_updated."""

    def test_frozen(self):
        options = HtmlOptions()
        with pytest.raises(FrozenInstanceError):
            options.heading_style = "atx"

    def test_create_updated_returns_copy(self):
        options = HtmlOptions()
        updated = options.create_updated(heading_style="atx", bullets="-")
        assert updated.heading_style == "atx"
        assert updated.bullets == "-"
        assert options.heading_style == "underlined"
        assert options.bullets == "*+-"

    def test_create_updated_validates(self):
        with pytest.raises(ValueError):
            HtmlOptions().create_updated(newline_style="bogus")

    def test_create_updated_rejects_unknown_field(self):
        with pytest.raises(TypeError):
            HtmlOptions().create_updated(no_such_option=True)

    def test_field_names(self):
        names = HtmlOptions.field_names()
        assert "heading_style" in names
        assert "wrap_width" in names
        assert "no_such_option" not in names

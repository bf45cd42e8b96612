"""Tests for file loading and saving."""

import pytest

from pcb_sexpr.exceptions import FileNotFoundError, ParseError
from pcb_sexpr.io import load, parse_file, read_source, save
from pcb_sexpr.serializer import SerializeOptions
from pcb_sexpr.values import QuotedString, SExpr


class TestParseFile:
    """Tests for parse_file/load."""

    def test_parse_file(self, symbol_lib_file):
        """A file parses into its root node."""
        root = parse_file(symbol_lib_file)
        assert root.name == "kicad_symbol_lib"
        assert root.find_child("generator").values == [QuotedString("pcb")]

    def test_load_alias(self, symbol_lib_file):
        """load is the same as parse_file."""
        assert load(symbol_lib_file) == parse_file(str(symbol_lib_file))

    def test_missing_file(self, tmp_path):
        """A missing file raises the project FileNotFoundError."""
        with pytest.raises(FileNotFoundError) as exc:
            parse_file(tmp_path / "missing.kicad_sym")
        assert "missing.kicad_sym" in exc.value.context["file"]
        assert exc.value.suggestions

    def test_parse_error_has_file(self, tmp_path):
        """Parse errors name the file."""
        path = tmp_path / "broken.kicad_sym"
        path.write_text("(kicad_symbol_lib (version 1)")
        with pytest.raises(ParseError, match="Expected closing parenthesis") as exc:
            parse_file(path)
        assert exc.value.context["file"] == str(path)
        assert exc.value.context["list"] == "kicad_symbol_lib"


    def test_trailing_content_lenient_by_default(self, tmp_path):
        """Content after the root is ignored unless strict is set."""
        path = tmp_path / "two.sexp"
        path.write_text("(a 1)\n(b 2)\n")
        assert parse_file(path) == SExpr("a", 1.0)
        with pytest.raises(ParseError, match="after the first s-expression") as exc:
            parse_file(path, strict=True)
        assert exc.value.context["file"] == str(path)

    def test_read_source(self, tmp_path):
        """read_source returns the text and rejects missing files."""
        path = tmp_path / "a.sexp"
        path.write_text("(a)", encoding="utf-8")
        assert read_source(path) == "(a)"
        with pytest.raises(FileNotFoundError):
            read_source(tmp_path / "missing.sexp")

class TestSave:
    """Tests for save."""

    def test_save_and_reload(self, tmp_path):
        """Saved files end with a newline and reload equal."""
        node = SExpr("root", SExpr("xy", 1, 2), SExpr("name", QuotedString("a b")))
        path = tmp_path / "out.sexp"
        save(node, path)
        text = path.read_text(encoding="utf-8")
        assert text == '(root (xy 1 2) (name "a b"))\n'
        assert load(path) == node

    def test_save_with_options(self, tmp_path):
        """Options control the written layout."""
        node = SExpr("root", SExpr("xy", 1, 2))
        path = tmp_path / "out.sexp"
        save(node, path, SerializeOptions(compact=False))
        assert path.read_text(encoding="utf-8") == "(root\n  (xy 1 2))\n"

    def test_save_unicode(self, tmp_path):
        """Files are written as UTF-8."""
        node = SExpr("text", QuotedString("Ω µF"))
        path = tmp_path / "out.sexp"
        save(node, path)
        assert load(path).get_string_value(0) == "Ω µF"

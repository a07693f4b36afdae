"""Testy maszyny stanów i publicznego API parsowania."""

import io
import textwrap

import pytest

from mod_model import Exclude, GoMod, Replace, Require, Retract, to_dict
from mod_parser import (
    ErrorCode,
    ModParseError,
    parse_file,
    parse_stream,
    parse_string,
)


class TestEndToEnd:

    def test_full_document(self, full_gomod):
        mod = parse_string(full_gomod)

        assert mod.name == "github.com/example/project"
        assert mod.go_version == "1.21"
        assert len(mod.requires) == 2
        assert len(mod.replaces) == 1
        assert len(mod.excludes) == 1
        assert len(mod.retracts) == 2

        assert mod.requires == (
            Require("github.com/pkg/errors", "v0.9.1", False),
            Require("golang.org/x/text", "v0.3.7", True),
        )
        assert mod.replaces == (
            Replace(old_path="github.com/old/module", new_path="github.com/new/module", new_version="v1.0.0"),
        )
        assert mod.excludes == (Exclude("github.com/bad/module", "v1.0.0"),)
        assert mod.retracts == (
            Retract(version="v1.0.0", rationale="Published accidentally"),
            Retract(version_low="v1.1.0", version_high="v1.2.0"),
        )

    def test_parsing_twice_gives_equal_documents(self, full_gomod):
        assert parse_string(full_gomod) == parse_string(full_gomod)

    def test_document_is_immutable(self, full_gomod):
        mod = parse_string(full_gomod)
        with pytest.raises(AttributeError):
            mod.name = "other"  # type: ignore[misc]
        assert isinstance(mod.requires, tuple)

    def test_empty_input(self):
        assert parse_string("") == GoMod()

    def test_to_dict(self, full_gomod):
        data = to_dict(parse_string(full_gomod))
        assert data["name"] == "github.com/example/project"
        assert data["requires"][1] == {"path": "golang.org/x/text", "version": "v0.3.7", "indirect": True}
        assert data["retracts"][1]["version_low"] == "v1.1.0"


class TestLineClassification:

    def test_declaration_order_preserved(self):
        mod = parse_string(textwrap.dedent("""\
            module m
            require c/c v1.0.0
            require (
                a/a v1.0.0
                b/b v1.0.0
            )
            require d/d v1.0.0
        """))
        assert [r.path for r in mod.requires] == ["c/c", "a/a", "b/b", "d/d"]

    def test_duplicates_are_kept(self):
        mod = parse_string("require a/a v1.0.0\nrequire a/a v1.0.0\n")
        assert len(mod.requires) == 2

    def test_comments_and_blank_lines_skipped(self):
        mod = parse_string(textwrap.dedent("""\
            // Copyright header

            module m
            // indirect
            require (
                // grouped deps
                a/a v1.0.0

            )
        """))
        assert mod.name == "m"
        assert mod.requires == (Require("a/a", "v1.0.0"),)

    def test_block_opener_without_space(self):
        mod = parse_string("exclude(\n  bad/mod v1.0.0\n)\n")
        assert mod.excludes == (Exclude("bad/mod", "v1.0.0"),)

    def test_all_block_kinds(self):
        mod = parse_string(textwrap.dedent("""\
            replace (
                old v0.5.0 => new v1.0.0
                example.com/a => ../a
            )
            exclude (
                bad/mod v1.0.0
                bad/mod v1.0.1
            )
            retract (
                // comment inside retract block
                [v0.5.0, v0.9.9] // experimental
            )
        """))
        assert len(mod.replaces) == 2
        assert mod.replaces[0].old_version == "v0.5.0"
        assert len(mod.excludes) == 2
        assert mod.retracts == (Retract(version_low="v0.5.0", version_high="v0.9.9", rationale="experimental"),)

    def test_unterminated_block_is_accepted(self):
        # Znane ograniczenie: brak ")" na końcu pliku nie jest błędem
        mod = parse_string("module m\nrequire (\n  a/a v1.0.0\n")
        assert mod.requires == (Require("a/a", "v1.0.0"),)

    def test_closing_paren_outside_block(self):
        with pytest.raises(ModParseError) as exc_info:
            parse_string("module m\n)\n")
        assert exc_info.value.code == ErrorCode.UNRECOGNIZED_LINE
        assert exc_info.value.line == 2

    def test_top_level_lines_after_block(self):
        mod = parse_string("require (\n a/a v1.0.0\n)\ngo 1.22\n")
        assert mod.go_version == "1.22"

    def test_block_lines_with_comment_ending_in_paren(self):
        mod = parse_string(textwrap.dedent("""\
            require (
                a/a v1.0.0 // indirect (
                b/b v1.1.0 // pinned (see #12)
            )
            retract (
                v1.0.0 // broken build (see issue)
                v1.0.1 // oops (
            )
        """))
        assert mod.requires == (
            Require("a/a", "v1.0.0", True),
            Require("b/b", "v1.1.0", False),
        )
        assert mod.retracts == (
            Retract(version="v1.0.0", rationale="broken build (see issue)"),
            Retract(version="v1.0.1", rationale="oops ("),
        )

    def test_single_line_with_comment_ending_in_paren(self):
        mod = parse_string("retract v1.0.0 // see (\nrequire a/a v1.0.0 // indirect (\n")
        assert mod.retracts == (Retract(version="v1.0.0", rationale="see ("),)
        assert mod.requires == (Require("a/a", "v1.0.0", True),)

    def test_block_keyword_inside_block_switches_block(self):
        mod = parse_string("require (\n a/a v1.0.0\nexclude (\n bad/mod v1.0.0\n)\n")
        assert mod.requires == (Require("a/a", "v1.0.0"),)
        assert mod.excludes == (Exclude("bad/mod", "v1.0.0"),)


class TestErrors:

    def test_unrecognized_line_counts_skipped_lines(self):
        content = "module m\n\n// comment\n\nthis is plain prose\n"
        with pytest.raises(ModParseError) as exc_info:
            parse_string(content)
        err = exc_info.value
        assert err.code == ErrorCode.UNRECOGNIZED_LINE
        assert err.line == 5
        assert err.text == "this is plain prose"
        assert str(err).startswith("linia 5:")

    @pytest.mark.parametrize("content", [
        "module example.com/a extra\n",
        "module a b\n",
        "require a/a\n",
        "exclude bad/mod\n",
    ])
    def test_known_keyword_wrong_shape_is_unrecognized(self, content):
        with pytest.raises(ModParseError) as exc_info:
            parse_string(content)
        assert exc_info.value.code == ErrorCode.UNRECOGNIZED_LINE
        assert exc_info.value.line == 1

    def test_malformed_go_directive(self):
        with pytest.raises(ModParseError) as exc_info:
            parse_string("module m\ngo\n")
        assert exc_info.value.code == ErrorCode.UNRECOGNIZED_LINE
        assert exc_info.value.line == 2

    def test_block_line_error_annotated(self):
        content = "module m\n\nrequire (\n  a/a v1.0.0\n  broken\n)\n"
        with pytest.raises(ModParseError) as exc_info:
            parse_string(content)
        assert exc_info.value.code == ErrorCode.INVALID_REQUIRE
        assert exc_info.value.line == 5
        assert exc_info.value.text == "broken"

    def test_replace_block_missing_arrow(self):
        with pytest.raises(ModParseError) as exc_info:
            parse_string("replace (\n  old new v1.0.0\n)\n")
        assert exc_info.value.code == ErrorCode.INVALID_REPLACE
        assert exc_info.value.line == 2

    @pytest.mark.parametrize("opener", ["module (", "go (", "toolchain (", "("])
    def test_unknown_block(self, opener):
        with pytest.raises(ModParseError) as exc_info:
            parse_string(f"module m\n{opener}\n)\n")
        assert exc_info.value.code == ErrorCode.UNKNOWN_BLOCK
        assert exc_info.value.line == 2

    def test_error_is_value_error(self):
        with pytest.raises(ValueError):
            parse_string("nonsense\n")


class TestSources:

    def test_parse_stream(self, full_gomod):
        assert parse_stream(io.StringIO(full_gomod)) == parse_string(full_gomod)

    def test_parse_stream_from_list(self):
        mod = parse_stream(["module m", "go 1.20"])
        assert (mod.name, mod.go_version) == ("m", "1.20")

    def test_parse_file(self, write_gomod, full_gomod):
        path = write_gomod(full_gomod)
        assert parse_file(path) == parse_string(full_gomod)
        assert parse_file(str(path)).name == "github.com/example/project"

    def test_parse_file_crlf(self, write_gomod):
        path = write_gomod("module m\r\ngo 1.21\r\n")
        mod = parse_file(path)
        assert (mod.name, mod.go_version) == ("m", "1.21")

    @pytest.mark.parametrize("content", [
        "module m\nretract v1.0.0 // a\u2028b\ngo 1.21\n",
        "module m\nretract v1.0.0 // a\x0cb\x85c\ngo 1.21\n",
    ])
    def test_string_and_file_split_lines_alike(self, write_gomod, content):
        mod = parse_string(content)
        assert mod.go_version == "1.21"
        assert len(mod.retracts) == 1
        assert parse_file(write_gomod(content)) == mod

    def test_form_feed_does_not_shift_line_numbers(self):
        with pytest.raises(ModParseError) as exc_info:
            parse_string("module m\x0cgo 1.21\nprose here\n")
        assert exc_info.value.line == 1

    def test_parse_file_missing(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            parse_file(tmp_path / "nope" / "go.mod")

    def test_parse_file_error_has_line(self, write_gomod):
        path = write_gomod("module m\nrequire\n")
        with pytest.raises(ModParseError) as exc_info:
            parse_file(path)
        assert exc_info.value.code == ErrorCode.UNRECOGNIZED_LINE
        assert exc_info.value.line == 2

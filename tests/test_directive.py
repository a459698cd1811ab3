"""Tests for include directive scanning."""

import pytest

from include_shader.directive import IncludeDirective, is_directive_line, scan_directives
from include_shader.errors import MalformedDirective


class TestScanDirectives:
    """Test line-oriented directive recognition."""

    def test_no_directives(self):
        assert scan_directives("void main() {}\n") == []

    def test_empty_text(self):
        assert scan_directives("") == []

    def test_single_directive_span(self):
        text = 'uniform vec2 u;\n#include "rand.glsl"\nvoid main() {}\n'
        [directive] = scan_directives(text)

        assert directive.path == "rand.glsl"
        assert directive.line == 2
        assert text[directive.start : directive.end] == '#include "rand.glsl"'

    def test_indented_directive_keeps_indent_outside_span(self):
        text = '    #include "a.glsl"  \n'
        [directive] = scan_directives(text)

        assert directive.start == 4
        assert text[directive.start : directive.end] == '#include "a.glsl"'

    def test_directives_in_source_order(self):
        text = '#include "b.glsl"\n// text\n#include "a.glsl"\n'
        paths = [d.path for d in scan_directives(text)]

        assert paths == ["b.glsl", "a.glsl"]

    def test_crlf_offsets(self):
        text = 'x\r\n#include "a.glsl"\r\ny'
        [directive] = scan_directives(text)

        assert directive.line == 2
        assert text[directive.start : directive.end] == '#include "a.glsl"'

    def test_directive_inside_comment_is_still_a_directive(self):
        text = '/*\n#include "a.glsl"\n*/\n'

        assert scan_directives(text) == [IncludeDirective("a.glsl", 2, 3, 20)]

    def test_absolute_path(self):
        [directive] = scan_directives('#include "/usr/share/shaders/a.glsl"')

        assert directive.path == "/usr/share/shaders/a.glsl"

    def test_similar_lines_are_plain_text(self):
        text = '#include_guard\n# include "a.glsl"\n#pragma include\nx = "#include";\n'

        assert scan_directives(text) == []


class TestMalformedDirectives:
    """Directive-like lines that do not parse must fail."""

    @pytest.mark.parametrize(
        "line",
        [
            "#include util.glsl",
            "#include",
            '#include ""',
            '#include "util.glsl',
            "#include <util.glsl>",
            '#include "a.glsl" trailing',
            '#include"a.glsl"',
            "#include<util.glsl>",
            "#include'util.glsl'",
            "#include/util.glsl",
        ],
    )
    def test_malformed(self, line, tmp_path):
        with pytest.raises(MalformedDirective) as exc_info:
            scan_directives("void f();\n" + line + "\n", tmp_path / "main.glsl")

        assert exc_info.value.line == 2
        assert exc_info.value.file == tmp_path / "main.glsl"
        assert "main.glsl:2" in str(exc_info.value)


def test_is_directive_line():
    assert is_directive_line('  #include "a.glsl"')
    assert is_directive_line("#include a.glsl")
    assert not is_directive_line("#includes")
    assert not is_directive_line("// #include")

from codegen.generation.context import GenerationContext
from codegen.generation.fields import enclose_in_single_quotes, format_field_table
from codegen.snippets.registry import SnippetRegistry


def test_enclose_in_single_quotes():
    assert enclose_in_single_quotes("VALUE") == "'VALUE'"
    assert enclose_in_single_quotes("") == "''"


def test_field_table_rows_follow_given_order():
    fields = [("SORT", "500"), ("CODE", "'_code_'")]
    out = format_field_table(fields, indent="    ", line_break="\n")
    assert out == "    'SORT' => 500,\n    'CODE' => '_code_',\n"

    reordered = format_field_table(list(reversed(fields)), indent="    ", line_break="\n")
    assert reordered == "    'CODE' => '_code_',\n    'SORT' => 500,\n"


def test_field_table_accepts_mapping_in_insertion_order():
    out = format_field_table({"B": "2", "A": "1"}, indent="\t", line_break="\r\n")
    assert out == "\t'B' => 2,\r\n\t'A' => 1,\r\n"


def test_empty_field_table():
    assert format_field_table([], indent="    ", line_break="\n") == ""


def test_context_fields_uses_depth_and_settings():
    ctx = GenerationContext(SnippetRegistry())
    assert ctx.fields([("X", "1")], depth=2) == "        'X' => 1,\n"
    ctx = GenerationContext(SnippetRegistry(), line_break="\r\n", indent="\t")
    assert ctx.fields([("X", "1")]) == "\t'X' => 1,\r\n"


def test_context_lines_skips_absent_and_empty_snippets():
    snippets = SnippetRegistry()
    snippets.add("a", "A")
    snippets.add("blank", "")
    snippets.add("b", "B")
    ctx = GenerationContext(snippets)
    assert ctx.lines(["a", "missing", "blank", "b"]) == "A\nB\n"
    assert ctx.lines(["a"], prefix="  ") == "  A\n"
    assert ctx.snippet_or_empty("missing") == ""

import io

from ndndissect.dissector import Dissector, Options
from ndndissect.tlv import encode_block, escape


def run(data, dissect_content=False):
    out = io.StringIO()
    Dissector(io.BytesIO(data), out, Options(dissect_content=dissect_content)).dissect()
    return out.getvalue()


def test_empty_input_prints_nothing(capsys):
    assert run(b"") == ""
    assert capsys.readouterr().err == ""


def test_leaf_block():
    assert run(encode_block(8, b"ab")) == "8 (GenericNameComponent) (size: 2) [[ab]]\n"


def test_empty_leaf():
    assert run(encode_block(200, b"")) == "200 (UNKNOWN_APP) (size: 0) [[]]\n"


def test_tree_drawing():
    name_value = encode_block(8, b"a") + encode_block(8, b"b")
    data_value = encode_block(7, name_value) + encode_block(21, b"hi")
    output = run(encode_block(6, data_value))
    assert output.splitlines() == [
        f"6 (Data) (size: {len(data_value)})",
        f"\u251c\u25007 (Name) (size: {len(name_value)})",
        "\u2502 \u251c\u25008 (GenericNameComponent) (size: 1) [[a]]",
        "\u2502 \u2514\u25008 (GenericNameComponent) (size: 1) [[b]]",
        "\u2514\u250021 (Content) (size: 2) [[hi]]",
    ]


def test_spaces_under_last_branch():
    inner = encode_block(7, encode_block(8, b"x"))
    output = run(encode_block(6, inner))
    assert output.splitlines()[-1] == "  \u2514\u25008 (GenericNameComponent) (size: 1) [[x]]"


def test_content_not_dissected_by_default():
    content = encode_block(8, b"x")
    output = run(encode_block(21, content))
    assert output == f"21 (Content) (size: {len(content)}) [[{escape(content)}]]\n"


def test_content_dissected_with_option():
    content = encode_block(8, b"x")
    output = run(encode_block(21, content), dissect_content=True)
    assert output.splitlines() == [
        f"21 (Content) (size: {len(content)})",
        "\u2514\u25008 (GenericNameComponent) (size: 1) [[x]]",
    ]


def test_signature_values_never_dissected():
    inner = encode_block(8, b"x")
    for tlv_type in (23, 46):
        output = run(encode_block(tlv_type, inner), dissect_content=True)
        assert len(output.splitlines()) == 1
        assert output.endswith(f"[[{escape(inner)}]]\n")


def test_several_top_level_blocks():
    output = run(encode_block(5, b"") + encode_block(6, b""))
    assert output.splitlines() == [
        "5 (Interest) (size: 0) [[]]",
        "6 (Data) (size: 0) [[]]",
    ]


def test_error_reports_offset(capsys):
    first = encode_block(8, b"a")
    second = encode_block(8, b"bcd")
    output = run(first + second + b"\x08\x05ab")
    assert len(output.splitlines()) == 2
    err = capsys.readouterr().err
    assert err.startswith("ERROR: ")
    assert err.rstrip().endswith(f"at offset {len(first) + len(second)}")


def test_error_at_start(capsys):
    assert run(b"\x00\x00") == ""
    assert capsys.readouterr().err.rstrip().endswith("at offset 0")


def test_deep_nesting():
    depth = 1500
    wire = encode_block(7, b"")
    for _ in range(depth - 1):
        wire = encode_block(7, wire)
    lines = run(wire).splitlines()
    assert len(lines) == depth
    assert lines[-1].endswith("7 (Name) (size: 0) [[]]")
    assert lines[-1].startswith("  " * (depth - 2) + "\u2514\u2500")
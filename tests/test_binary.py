# tests/test_binary.py
from blanklines.enums import Evidence, Verdict
from blanklines.pipeline.binary import contains_nul, detect_nul


def test_empty_input_has_no_nul():
    assert contains_nul(b"") is False


def test_plain_ascii_has_no_nul():
    assert contains_nul(b"Hello, world!") is False


def test_single_nul_in_large_text():
    data = b"a" * 500 + b"\x00" + b"b" * 500
    assert contains_nul(data) is True


def test_nul_past_any_sample_window_counts():
    data = b"clean text " * 1000 + b"\x00"
    assert contains_nul(data) is True


def test_detect_nul_result():
    result = detect_nul(b"abc\x00def")
    assert result is not None
    assert result.verdict is Verdict.BINARY
    assert result.evidence is Evidence.NUL_BYTE


def test_detect_nul_none_for_text():
    assert detect_nul("Héllo wörld".encode()) is None

# tests/test_orchestrator.py
from __future__ import annotations

import pytest

from blanklines.enums import Evidence, Failure, LineEnding
from blanklines.message import Request
from blanklines.pipeline import ProcessingResult
from blanklines.pipeline.orchestrator import find_boundary, run_body, run_message

_REQUEST_HEAD = b"POST /submit HTTP/1.1\r\nHost: example.com\r\nContent-Length: 17"


def test_find_boundary_crlf():
    assert find_boundary(b"GET / HTTP/1.1\r\nHost: a\r\n\r\nbody") == (23, LineEnding.CRLF)


def test_find_boundary_lf():
    assert find_boundary(b"GET / HTTP/1.1\nHost: a\n\nbody") == (22, LineEnding.LF)


def test_find_boundary_prefers_earlier_lf():
    data = b"GET / HTTP/1.1\nHost: a\n\nbody\r\n\r\nmore"
    assert find_boundary(data) == (22, LineEnding.LF)


def test_find_boundary_prefers_earlier_crlf():
    data = b"H: a\r\n\r\nbody\n\nmore"
    assert find_boundary(data) == (4, LineEnding.CRLF)


def test_find_boundary_none():
    assert find_boundary(b"GET / HTTP/1.1\r\nHost: a\r\n") is None


def test_no_boundary_passthrough():
    data = b"just one line\r\nand another\r\n"
    result = run_message(data)
    assert result.modified is False
    assert result.data is data
    assert result.failure is Failure.NO_BOUNDARY


def test_end_to_end_request():
    data = _REQUEST_HEAD + b"\r\n\r\n" + b"\r\n\r\nGET-like-body"
    result = run_message(data)
    assert result.modified is True
    assert result.data == _REQUEST_HEAD + b"\r\n\r\nGET-like-body"
    assert result.classification is not None
    assert result.classification.is_text


def test_text_body_interior_runs_collapsed():
    head = b"HTTP/1.1 200 OK\nContent-Type: text/plain"
    data = head + b"\n\n" + b"A\n\n\n\nB\n"
    result = run_message(data)
    assert result.data == head + b"\n\nA\n\nB\n"
    assert result.classification.evidence is Evidence.CONTENT_TYPE


def test_clean_message_is_unchanged():
    data = b"HTTP/1.1 200 OK\r\nContent-Type: text/html\r\n\r\n<p>one</p>\r\n\r\n<p>two</p>\r\n"
    result = run_message(data)
    assert result.modified is False
    assert result.data is data


def test_binary_body_only_leading_blanks_trimmed():
    body = b"\x89PNG\r\n\x1a\n\x00\x00\r\n\r\n\r\n\x00IHDR"
    data = b"HTTP/1.1 200 OK\r\n\r\n" + b"\r\n\r\n" + body
    result = run_message(data)
    assert result.modified is True
    assert result.data == b"HTTP/1.1 200 OK\r\n\r\n" + body
    assert not result.classification.is_text


def test_header_evidence_parsed_from_message():
    # Readable bytes, but the message declares an image.
    head = b"HTTP/1.1 200 OK\r\nContent-Type: image/png"
    body = b"line one\r\n\r\n\r\n\r\nline two"
    result = run_message(head + b"\r\n\r\n" + body)
    assert result.modified is False
    assert result.classification.evidence is Evidence.CONTENT_TYPE


def test_explicit_headers_override_parsed_ones():
    head = b"HTTP/1.1 200 OK\r\nContent-Type: image/png"
    body = b"line one\r\n\r\n\r\nline two"
    result = run_message(head + b"\r\n\r\n" + body, headers=[("Content-Type", "text/plain")])
    assert result.data == head + b"\r\n\r\nline one\r\n\r\nline two"


def test_empty_body_untouched():
    data = b"GET / HTTP/1.1\r\nHost: example.com\r\n\r\n"
    result = run_message(data)
    assert result.modified is False
    assert result.data is data


def test_blank_only_text_body_is_emptied():
    data = b"GET / HTTP/1.1\r\nHost: a\r\n\r\n\r\n\r\n"
    result = run_message(data)
    assert result.data == b"GET / HTTP/1.1\r\nHost: a\r\n\r\n"


def test_undecodable_text_body_reports_decode_failure():
    head = b"HTTP/1.1 200 OK\r\nContent-Type: text/plain; charset=latin-1"
    data = head + b"\r\n\r\n" + b"\r\ncaf\xe9\r\n\r\n\r\nend"
    result = run_message(data)
    assert result.failure is Failure.DECODE_FAILURE
    assert result.data == head + b"\r\n\r\ncaf\xe9\r\n\r\n\r\nend"


def test_internal_error_leaves_message_unchanged(monkeypatch):
    import blanklines.pipeline.orchestrator as orchestrator

    def boom(*args, **kwargs):
        raise RuntimeError("boom")

    monkeypatch.setattr(orchestrator, "run_classifier", boom)
    data = b"GET / HTTP/1.1\r\n\r\n\r\n\r\nbody"
    result = run_message(data)
    assert result.modified is False
    assert result.data is data
    assert result.failure is Failure.INTERNAL_ERROR


def test_run_body_trims_leading_blank_lines():
    request = Request(headers=(("Content-Length", "9"),), body=b"\r\n\r\nbody\n\n\nx")
    result = run_body(request)
    assert result.data == b"body\n\n\nx"
    assert result.modified is True


def test_run_body_unchanged():
    request = Request(headers=(), body=b"body")
    result = run_body(request)
    assert result == ProcessingResult(request.body, False)
    assert result.data is request.body


@pytest.mark.parametrize("sample_bytes", [1, 16, 4096])
def test_sample_bytes_is_passed_through(sample_bytes):
    data = b"GET / HTTP/1.1\r\n\r\n\r\nbody"
    assert run_message(data, sample_bytes=sample_bytes).data == b"GET / HTTP/1.1\r\n\r\nbody"

"""Tests for flightwatch.net.error_utils."""

from __future__ import annotations

import requests

from flightwatch.net.error_utils import summarize_error


class TestSummarizeError:
    def test_generic_exception(self):
        assert summarize_error(ValueError("oops")) == "oops"

    def test_empty_message_uses_class_name(self):
        assert summarize_error(ValueError()) == "ValueError"

    def test_truncation(self):
        result = summarize_error(ValueError("x" * 200), max_len=20)
        assert len(result) == 20
        assert result.endswith("...")

    def test_timeout_variants(self):
        assert summarize_error(requests.exceptions.ConnectTimeout("c")) == "Connect timeout"
        assert summarize_error(requests.exceptions.ReadTimeout("r")) == "Read timeout"
        assert summarize_error(requests.exceptions.Timeout("t")) == "Timeout"

    def test_ssl_error(self):
        assert summarize_error(requests.exceptions.SSLError("ssl fail")) == "TLS/SSL error"

    def test_too_many_redirects(self):
        assert summarize_error(requests.exceptions.TooManyRedirects("loop")) == "Too many redirects"

    def test_connection_error_dns(self):
        err = requests.exceptions.ConnectionError("Name or service not known")
        assert summarize_error(err) == "DNS failure"

    def test_connection_error_refused(self):
        err = requests.exceptions.ConnectionError("[Errno 111] Connection refused")
        assert summarize_error(err) == "Connection refused"

    def test_connection_error_generic(self):
        err = requests.exceptions.ConnectionError("something else")
        assert summarize_error(err) == "Connection error"

"""Unit tests for client IP resolution from forwarding headers."""

import pytest
from starlette.datastructures import Headers

from packages.client_locator.headers import FORWARDING_HEADERS, resolve_client_ip


@pytest.mark.unit
class TestResolveClientIp:
    """Test suite for resolve_client_ip."""

    def test_x_forwarded_for_wins(self):
        headers = {
            "X-Forwarded-For": "198.51.100.4",
            "Proxy-Client-IP": "203.0.113.7",
            "X-Real-IP": "192.0.2.1",
        }
        assert resolve_client_ip(headers, "10.0.0.1") == "198.51.100.4"

    def test_unknown_falls_through_to_next_header(self):
        headers = {"X-Forwarded-For": "unknown", "Proxy-Client-IP": "203.0.113.7"}
        assert resolve_client_ip(headers, "10.0.0.1") == "203.0.113.7"

    @pytest.mark.parametrize("value", ["unknown", "UNKNOWN", "UnKnOwN", ""])
    def test_unusable_values_are_skipped(self, value):
        headers = {"X-Forwarded-For": value, "X-Real-IP": "192.0.2.1"}
        assert resolve_client_ip(headers, "10.0.0.1") == "192.0.2.1"

    def test_empty_headers_return_remote_addr(self):
        assert resolve_client_ip({}, "10.0.0.1") == "10.0.0.1"

    def test_empty_remote_addr_returned_as_is(self):
        headers = {"X-Forwarded-For": "unknown"}
        assert resolve_client_ip(headers, "") == ""

    def test_all_headers_unknown_returns_remote_addr(self):
        headers = {name: "unknown" for name in FORWARDING_HEADERS}
        assert resolve_client_ip(headers, "10.0.0.1") == "10.0.0.1"

    def test_priority_order(self):
        """Each header beats every header after it."""
        for index, name in enumerate(FORWARDING_HEADERS):
            headers = {later: "192.0.2.99" for later in FORWARDING_HEADERS[index + 1 :]}
            headers[name] = f"198.51.100.{index}"
            assert resolve_client_ip(headers, "10.0.0.1") == f"198.51.100.{index}"

    def test_priority_order_is_fixed(self):
        assert FORWARDING_HEADERS == (
            "X-Forwarded-For",
            "Proxy-Client-IP",
            "WL-Proxy-Client-IP",
            "HTTP_X_FORWARDED_FOR",
            "HTTP_X_FORWARDED",
            "HTTP_X_CLUSTER_CLIENT_IP",
            "HTTP_CLIENT_IP",
            "HTTP_FORWARDED_FOR",
            "HTTP_FORWARDED",
            "HTTP_VIA",
            "REMOTE_ADDR",
            "X-Real-IP",
        )

    def test_header_lookup_is_case_insensitive(self):
        headers = {"x-forwarded-for": "198.51.100.4"}
        assert resolve_client_ip(headers, "10.0.0.1") == "198.51.100.4"

    def test_remote_addr_header_is_distinct_from_transport_address(self):
        headers = {"REMOTE_ADDR": "198.51.100.8"}
        assert resolve_client_ip(headers, "10.0.0.1") == "198.51.100.8"

    def test_values_are_not_parsed_or_split(self):
        headers = {"X-Forwarded-For": "198.51.100.4, 10.0.0.2"}
        assert resolve_client_ip(headers, "10.0.0.1") == "198.51.100.4, 10.0.0.2"

    def test_malformed_value_returned_verbatim(self):
        headers = {"Proxy-Client-IP": "not-an-ip"}
        assert resolve_client_ip(headers, "10.0.0.1") == "not-an-ip"

    def test_ipv6_value(self):
        headers = {"X-Real-IP": "2001:db8::1"}
        assert resolve_client_ip(headers, "10.0.0.1") == "2001:db8::1"

    def test_starlette_headers(self):
        headers = Headers(
            raw=[
                (b"x-forwarded-for", b"unknown"),
                (b"wl-proxy-client-ip", b"203.0.113.9"),
            ]
        )
        assert resolve_client_ip(headers, "10.0.0.1") == "203.0.113.9"

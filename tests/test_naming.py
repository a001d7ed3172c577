"""
Tests for directive name normalization.
"""

import pytest

from nginx_directive.utils.naming import snake_case


@pytest.mark.parametrize(
    ("token", "expected"),
    [
        ("server_name", "server_name"),
        ("serverName", "server_name"),
        ("ServerName", "server_name"),
        ("Server Name", "server_name"),
        ("fastcgiParam", "fastcgi_param"),
        ("HTTPServer", "httpserver"),
        ("listen", "listen"),
        ("", ""),
        ("80", "80"),
        ("größeWert", "größe_wert"),
    ],
)
def test_snake_case(token: str, expected: str) -> None:
    assert snake_case(token) == expected


@pytest.mark.parametrize("token", ["serverName", "Server Name", "a_B_c", "HTTPServer", "ÄpfelBirnen"])
def test_snake_case_is_idempotent(token: str) -> None:
    once = snake_case(token)
    assert snake_case(once) == once


def test_whitespace_is_always_removed() -> None:
    assert snake_case("server name") == "servername"
    assert snake_case(" listen\t") == "listen"
    assert snake_case("Server Name") == "server_name"

"""
Tests for recursive search over directive trees.
"""

from nginx_directive.config.directive import Directive
from nginx_directive.config.parser import parse_config


NESTED = """
http {
    server {
        listen 80;
        location / {
            location /a {
                deny all;
            }
        }
        location /b {
            allow all;
        }
    }
    server {
        listen 443;
    }
}
"""


def test_search_collects_direct_matches_first() -> None:
    root = parse_config(NESTED)
    server = root.http.server

    values = [d.value for d in server.search("location")]

    assert values == ["/", "/b", "/a"]


def test_search_spans_whole_tree() -> None:
    root = parse_config(NESTED)

    listens = root.search("listen")

    assert [d.value for d in listens] == ["80", "443"]
    assert len(root.search("server")) == 2
    assert root.search("upstream") == []


def test_search_returns_every_node_once(directive: Directive) -> None:
    everything = directive.search()
    walked = list(directive.walk())

    assert len(everything) == len(walked)
    assert len({id(d) for d in everything}) == len(everything)


def test_search_by_value(directive: Directive) -> None:
    matches = directive.search("access_log", "off")

    assert len(matches) == 3
    assert all(d.value == "off" for d in matches)


def test_search_normalizes_name(directive: Directive) -> None:
    assert directive.search("fastcgiParam") == directive.search("fastcgi_param")


def test_find(directive: Directive) -> None:
    assert directive.find("try_files") is directive.server.location.try_files
    assert directive.find("listen").value == "80"
    assert directive.find("undefined_directive") is None


def test_walk_is_document_order() -> None:
    root = parse_config(NESTED)

    names = [d.name for d in root.walk()]

    assert names == [
        "http",
        "server",
        "listen",
        "location",
        "location",
        "deny",
        "location",
        "allow",
        "server",
        "listen",
    ]

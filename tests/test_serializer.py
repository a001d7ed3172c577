"""
Tests for rendering directive trees to text, dicts and JSON.
"""

import json

import pytest

from nginx_directive.config.directive import Directive
from nginx_directive.config.parser import parse_config
from nginx_directive.config.serializer import from_dict, to_dict, to_string


SOURCE = """# upstreams
upstream backend {
  server 10.0.0.1:8080 weight=2;   # primary
  server 10.0.0.2:8080;
}

server {
  listen 80;
  location / { # app
    proxy_pass http://backend;
  } # end of app
}
"""

EXPECTED = """# upstreams
upstream backend {
    server 10.0.0.1:8080 weight=2; # primary
    server 10.0.0.2:8080;
}
server {
    listen 80;
    location / { # app
        proxy_pass http://backend;
    }
    # end of app
}
"""


def test_to_string_is_canonical() -> None:
    assert parse_config(SOURCE).to_string() == EXPECTED


def test_custom_indent() -> None:
    root = parse_config("events {\n    worker_connections 1024;\n}\n")

    assert root.to_string(2) == "events {\n  worker_connections 1024;\n}\n"
    assert root.to_string(0) == "events {\nworker_connections 1024;\n}\n"


def test_negative_indent_is_rejected() -> None:
    with pytest.raises(ValueError):
        to_string(Directive(), -1)


def test_subtree_rendering(directive: Directive) -> None:
    favicon = directive.server.get_children("location")[1]

    assert favicon.to_string() == (
        "location = /favicon.ico {\n"
        "    access_log off;\n"
        "    log_not_found off;\n"
        "}\n"
    )


def test_leaf_rendering() -> None:
    root = Directive()
    leaf = root.append("listen", "80", "public")
    bare = root.append("ip_hash")
    note = root.append(None, None, "just a note")

    assert leaf.to_string() == "listen 80; # public\n"
    assert bare.to_string() == "ip_hash;\n"
    assert note.to_string() == "# just a note\n"


def test_empty_section_becomes_statement() -> None:
    root = parse_config("location / {\n}\n")

    assert root.to_string() == "location /;\n"


def test_empty_root() -> None:
    assert Directive().to_string() == ""


def test_empty_comment_survives_round_trip() -> None:
    root = parse_config("#\nlisten 80;\n")

    assert root.to_string() == "#\nlisten 80;\n"
    assert parse_config(root.to_string()).to_dict() == root.to_dict()


def test_round_trip(directive: Directive) -> None:
    text = directive.to_string()
    reparsed = parse_config(text)

    assert reparsed.to_dict() == directive.to_dict()
    assert reparsed.to_string() == text


def test_round_trip_after_mutation(directive: Directive) -> None:
    server = directive.server
    server.prepend("serverTokens", "off", "hide version")
    server.location.append(None, None, "added")
    server.remove(server.get_children("location")[2])

    reparsed = parse_config(directive.to_string())

    assert reparsed.to_dict() == directive.to_dict()


def test_to_dict_shape() -> None:
    root = parse_config("listen 80; # public\n")

    assert to_dict(root) == {
        "name": None,
        "value": None,
        "comment": None,
        "children": [
            {"name": "listen", "value": "80", "comment": "public", "children": []},
        ],
    }


def test_to_json(directive: Directive) -> None:
    data = json.loads(directive.to_json())

    assert isinstance(data, dict)
    assert data == directive.to_dict()
    assert directive.to_json(indent=2).startswith("{\n")


def test_from_dict_rebuilds_tree(directive: Directive) -> None:
    rebuilt = from_dict(directive.to_dict())

    assert rebuilt.to_dict() == directive.to_dict()
    assert rebuilt.server.location.try_files.root() is rebuilt


def test_str_of_root_is_text(directive: Directive) -> None:
    assert parse_config(str(directive)).to_dict() == directive.to_dict()

# tests/helpers/test_url_builder.py

import pytest

from bootstrap_ui.helpers.url import UrlBuilder, dasherize


def test_string_target_is_used_verbatim():
    assert UrlBuilder(base="/app").build("https://example.com/x?y=1") == "https://example.com/x?y=1"


@pytest.mark.parametrize(
    "target, expected",
    [
        ({"controller": "Articles", "action": "index"}, "/articles/index"),
        ({"controller": "UserProfiles", "action": "editAll", "pass": [3, "a b"]}, "/user-profiles/edit-all/3/a%20b"),
        ({"prefix": "Admin", "controller": "Users", "action": "view", "pass": [1]}, "/admin/users/view/1"),
        ({"controller": "Articles", "action": "index", "?": {"page": 2, "sort": "title"}}, "/articles/index?page=2&sort=title"),
        ({"controller": "Articles", "action": "view", "pass": [5], "#": "comments"}, "/articles/view/5#comments"),
        ({"path": "docs/intro", "?": {"tag": ["a", "b"]}}, "/docs/intro?tag=a&tag=b"),
        ({}, "/"),
    ],
)
def test_route_descriptor(target, expected):
    assert UrlBuilder().build(target) == expected


def test_base_prefix():
    assert UrlBuilder(base="/app/").build({"path": "/x"}) == "/app/x"


def test_dasherize():
    assert dasherize("UserProfiles") == "user-profiles"
    assert dasherize("edit_all") == "edit-all"
    assert dasherize("index") == "index"

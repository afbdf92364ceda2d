"""Shared fixtures: run options and raw engine messages."""

import pytest

from a11yscan.options import build_options

LONG_ATTRIBUTES = (
    '<element with="loads of attributes" that="push the total outerHTML length" '
    'to="more than we really want to send back to Node.js" this="is getting kind of '
    'silly now, I really want to stop writing dummy text to push the length of this '
    'element out">baz inner</element>'
)


@pytest.fixture
def long_attributes():
    return LONG_ATTRIBUTES


@pytest.fixture
def options():
    return {"ignore": [], "standard": "FOO-STANDARD"}


@pytest.fixture
def run_options():
    return build_options()


@pytest.fixture
def raw_messages():
    return [
        {
            "code": "foo-code",
            "element": {
                "innerHTML": "foo inner",
                "outerHTML": "<element>foo inner</element>",
            },
            "msg": "foo message",
            "type": 1,
        },
        {
            "code": "bar-code",
            "element": {
                "innerHTML": "bar inner at more than 30 characters long",
                "outerHTML": "<element>bar inner at more than 30 characters long</element>",
            },
            "msg": "bar message",
            "type": 2,
        },
        {
            "code": "baz-code",
            "element": {
                "innerHTML": "baz inner",
                "outerHTML": LONG_ATTRIBUTES,
            },
            "msg": "baz message",
            "type": 3,
        },
    ]

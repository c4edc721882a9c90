import io
import json
import logging

import pytest

from jsonmark import JSONMark, Settings
from jsonmark.install import install, installed_codec, is_installed, original_json, uninstall


@pytest.fixture
def arrow_codec() -> JSONMark:
    return JSONMark(marker="→", delimiter="|", settings=Settings())


def test_install_patches_json_functions(arrow_codec, caplog):
    caplog.set_level(logging.INFO, logger="jsonmark.install")

    install(arrow_codec)

    assert is_installed()
    assert installed_codec() is arrow_codec
    assert json.dumps({"n": 2**64}) == f'{{"n": "→bigint|{2**64}"}}'
    assert json.loads(f'{{"n": "→bigint|{2**64}"}}') == {"n": 2**64}
    assert any("installed" in record.getMessage() for record in caplog.records)


def test_uninstall_restores_originals(arrow_codec):
    install(arrow_codec)
    uninstall()

    assert not is_installed()
    assert json.dumps is original_json.dumps
    assert json.loads is original_json.loads


def test_uninstall_when_not_installed_is_safe():
    uninstall()
    uninstall()

    assert json.dumps is original_json.dumps


def test_install_same_codec_is_idempotent(arrow_codec):
    install(arrow_codec)
    patched = json.dumps
    install(arrow_codec)

    assert json.dumps is patched


def test_install_other_codec_replaces_patch(arrow_codec):
    other = JSONMark(marker="=", settings=Settings())
    install(arrow_codec)
    install(other)

    assert installed_codec() is other
    assert json.dumps(2**64) == f'"=bigint:{2**64}"'


def test_install_defaults_to_default_codec():
    codec = install()

    assert codec is installed_codec()
    assert json.loads(json.dumps(b"\x00")) == b"\x00"


def test_patched_dumps_forwards_formatting(arrow_codec):
    install(arrow_codec)

    assert json.dumps({"b": 1, "a": [1]}, indent=2, sort_keys=True) == '{\n  "a": [\n    1\n  ],\n  "b": 1\n}'


def test_patched_dumps_ignores_unsupported_keywords(arrow_codec, caplog):
    caplog.set_level(logging.DEBUG, logger="jsonmark.install")
    install(arrow_codec)

    assert json.dumps([1], allow_nan=False, check_circular=False) == "[1]"
    assert any("allow_nan" in record.getMessage() for record in caplog.records)


def test_json_load_goes_through_codec(arrow_codec):
    install(arrow_codec)

    assert json.load(io.StringIO('["→bigint|18446744073709551616"]')) == [2**64]


def test_codec_never_uses_patched_functions(arrow_codec):
    install(arrow_codec)

    # stringify would recurse forever if it called the patched json.dumps
    assert arrow_codec.stringify({"a": 1}) == '{"a": 1}'

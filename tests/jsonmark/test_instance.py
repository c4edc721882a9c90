import jsonmark
from jsonmark import JSONMark, Settings, instance


def test_default_codec_is_lazy_and_shared():
    first = instance.get_default()

    assert isinstance(first, JSONMark)
    assert instance.get_default() is first
    assert instance.default is first


def test_module_level_functions_round_trip():
    text = jsonmark.stringify({"n": 2**64, "raw": b"\x01"})

    assert jsonmark.parse(text) == {"n": 2**64, "raw": b"\x01"}
    assert jsonmark.restore(jsonmark.prepare([2**64])) == [2**64]


def test_push_default_scopes_the_codec():
    eq = JSONMark(marker="=", settings=Settings())

    with instance.push_default(eq):
        assert jsonmark.stringify(2**64) == f'"=bigint:{2**64}"'
    assert instance.get_default() is not eq


def test_set_default_replaces_process_codec():
    eq = JSONMark(marker="=", settings=Settings())
    instance.set_default(eq)

    assert jsonmark.parse('"=bigint:18446744073709551616"') == 2**64


def test_default_reads_environment(monkeypatch):
    monkeypatch.setenv("JSONMARK_MARKER", "~")

    assert jsonmark.stringify(2**64) == f'"~bigint:{2**64}"'


def test_version_is_a_string():
    assert isinstance(jsonmark.__version__, str)

import logging

import jobtracker.logging_config as lc


def test_setup_logging_string_level():
    lc.setup_logging("debug")
    assert logging.getLogger().level <= logging.DEBUG


def test_setup_logging_with_none_level():
    lc.setup_logging(None)
    assert isinstance(logging.getLogger().level, int)


def test_setup_logging_replaces_handlers():
    lc.setup_logging("info")
    lc.setup_logging("info")
    assert len(logging.getLogger().handlers) == 1
    assert logging.getLogger("urllib3").level == logging.WARNING


def test_setup_logging_import_failure_falls_back(monkeypatch):
    import builtins

    orig_import = builtins.__import__

    def fake_import(name, *args, **kwargs):
        if name == "jobtracker.config":
            raise RuntimeError("boom")
        return orig_import(name, *args, **kwargs)

    monkeypatch.setattr(builtins, "__import__", fake_import)
    lc.setup_logging(None)
    assert logging.getLogger().level == logging.INFO

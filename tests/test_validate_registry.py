import logging

from validate_registry import main


def test_registry_validation_passes(capsys, caplog):
    caplog.set_level(logging.WARNING)
    assert main() == 0

    out = capsys.readouterr().out
    assert "Total: 6/6 checks passed" in out
    # "ton" has no display label and is reported, not failed.
    assert any("ton" in rec.getMessage() for rec in caplog.records)


def test_raising_check_fails_the_run(monkeypatch, capsys):
    import validate_registry

    def check_broken():
        raise RuntimeError("table defect")

    monkeypatch.setattr(validate_registry, "CHECKS", (check_broken,))
    assert validate_registry.main() == 1
    assert "Failed: check_broken" in capsys.readouterr().out

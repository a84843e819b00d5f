from __future__ import annotations

import runpy


def test_main_module_runs_uvicorn(monkeypatch):
    executed = {}

    def fake_run(app_path: str, **kwargs) -> None:
        executed["app"] = app_path
        executed.update(kwargs)

    monkeypatch.setattr("uvicorn.run", fake_run)
    monkeypatch.setenv("SERVICE_PORT", "9100")

    runpy.run_module("garment_forecast.main.__main__", run_name="__main__")

    assert executed["app"] == "garment_forecast.main.app:app"
    assert executed["port"] == 9100
    assert executed["reload"] is False

"""Tests for main module."""

from life_tracker import main as main_module


def test_main_serves_configured_app(monkeypatch, tmp_path) -> None:
    calls: dict[str, object] = {}

    def fake_run(app, host, port) -> None:  # type: ignore[no-untyped-def]
        calls.update(app=app, host=host, port=port)

    monkeypatch.setenv("TRACKER_DATA_DIR", str(tmp_path))
    monkeypatch.setenv("PORT", "4010")
    monkeypatch.delenv("HOST", raising=False)
    monkeypatch.setattr(main_module.uvicorn, "run", fake_run)

    main_module.main()

    assert calls["host"] == "127.0.0.1"
    assert calls["port"] == 4010
    assert calls["app"].state.container.settings.tracker_data_dir == tmp_path

import importlib


def test_policy_env_overrides(monkeypatch):
    monkeypatch.setenv("SSSA_MAX_SHARES", "1000")
    monkeypatch.setenv("SSSA_TRACE_POINTS", "yes")
    monkeypatch.setenv("SSSA_LOG_LEVEL", "debug")

    policy_module = importlib.import_module("sssa.policy")
    reloaded = importlib.reload(policy_module)

    try:
        policy = reloaded.policy
        assert policy.max_shares == 1000
        assert policy.trace_points is True
        assert policy.log_level == "DEBUG"
    finally:
        monkeypatch.delenv("SSSA_MAX_SHARES", raising=False)
        monkeypatch.delenv("SSSA_TRACE_POINTS", raising=False)
        monkeypatch.delenv("SSSA_LOG_LEVEL", raising=False)
        importlib.reload(policy_module)


def test_policy_ignores_malformed_values(monkeypatch):
    monkeypatch.setenv("SSSA_MAX_SHARES", "many")
    monkeypatch.setenv("SSSA_LOG_LEVEL", "loud")

    from sssa.policy import load_policy

    policy = load_policy()
    assert policy.max_shares == 255
    assert policy.log_level == "WARNING"
    assert policy.trace_points is False


def test_point_traces_are_logged_when_enabled(monkeypatch, caplog):
    from sssa import create_bytes, splitter
    from sssa.policy import SharingPolicy

    monkeypatch.setattr(splitter, "policy", SharingPolicy(trace_points=True))
    with caplog.at_level("DEBUG", logger="sssa.splitter"):
        create_bytes(2, 2, bytes(32))
    messages = [r.getMessage() for r in caplog.records]
    assert any(m.startswith("share[1][0].y = ") for m in messages)
    assert any("is 64 bytes" in m for m in messages)


def test_point_traces_are_off_by_default(caplog):
    from sssa import create_bytes

    with caplog.at_level("DEBUG", logger="sssa.splitter"):
        create_bytes(2, 2, bytes(32))
    assert not any(".x = " in r.getMessage() for r in caplog.records)

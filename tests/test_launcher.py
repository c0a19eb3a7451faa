"""Unit tests for pblaunch.launcher."""

import os
from unittest.mock import patch

from pblaunch.binary import binary_name
from pblaunch.launcher import build_launch_plan
from pblaunch.models import LauncherConfig


def test_returns_none_without_binary(tmp_path) -> None:
    with patch("pblaunch.launcher.ensure_executable") as mock_ensure:
        assert build_launch_plan("start", [], LauncherConfig(), base_dir=str(tmp_path)) is None
    mock_ensure.assert_not_called()


def test_builds_plan_for_found_binary(tmp_path, monkeypatch) -> None:
    monkeypatch.setenv("PB_ENC_KEY", "k")
    path = tmp_path / binary_name()
    path.write_text("")

    with patch("pblaunch.launcher.ensure_executable") as mock_ensure:
        plan = build_launch_plan(
            "start", ["--dev"], LauncherConfig(port="9000"), base_dir=str(tmp_path)
        )

    mock_ensure.assert_called_once_with(str(path))
    assert plan.executable == str(path)
    assert plan.arguments == ["serve", "--http=0.0.0.0:9000", "--dev"]
    assert plan.argv == [str(path), "serve", "--http=0.0.0.0:9000", "--dev"]
    assert plan.env["PB_ENC_KEY"] == "k"
    assert plan.env is not os.environ

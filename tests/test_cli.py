from unittest import mock

import pytest
import requests
from typer.testing import CliRunner

from rmq_queue_activity import ProbeError, Status, Verdict
from rmq_queue_activity.cli import app, render

runner = CliRunner()


@pytest.fixture
def api():
    with mock.patch("rmq_queue_activity.probe.requests.get") as get:
        yield get


def listing(*queues):
    response = mock.Mock()
    response.json.return_value = [
        {"name": name, "backing_queue_status": {"avg_ingress_rate": ingress, "avg_egress_rate": egress}}
        for name, ingress, egress in queues
    ]
    return response


def test_render() -> None:
    assert render(Verdict(Status.OK)) == "QueueActivity OK"
    assert render(Verdict(Status.WARNING, ("x", "y"))) == "QueueActivity WARNING: x, y"


def test_ok_exit_code(api) -> None:
    api.return_value = listing(("a", 300.0, 300.0), ("b", 300.0, 300.0))
    result = runner.invoke(app, ["--queue", "a,b"])
    assert result.exit_code == 0
    assert result.stdout.strip() == "QueueActivity OK"


def test_critical_exit_code(api) -> None:
    api.return_value = listing(("a", 100.0, 50.0), ("b", 80.0, 40.0))
    result = runner.invoke(app, ["-q", "a,b", "-w", "250", "-c", "500"])
    assert result.exit_code == 2
    assert result.stdout.strip() == "QueueActivity CRITICAL: a: 100.0/50.0, b: 80.0/40.0"


def test_missing_queue_exit_code(api) -> None:
    api.return_value = listing(("a", 300.0, 300.0), ("b", 300.0, 300.0))
    result = runner.invoke(app, ["-q", "a,b,c"])
    assert result.exit_code == 1
    assert "Queue c not available" in result.stdout


def test_unreachable_api_is_warning(api) -> None:
    api.side_effect = requests.ConnectionError("refused")
    result = runner.invoke(app, ["-q", "a", "--warn", "0", "--critical", "0"])
    assert result.exit_code == 1
    assert result.stdout.strip() == "QueueActivity WARNING: could not get queue information"


def test_connection_options_reach_request(api) -> None:
    api.return_value = listing()
    runner.invoke(
        app,
        ["-q", "a", "-h", "mq", "-p", "15671", "--ssl", "--user", "ops", "--password", "pw", "--vhost", "/"],
    )
    api.assert_called_once_with("https://mq:15671/api/queues/%2F", auth=("ops", "pw"))


def test_missing_queue_option_is_unknown(api) -> None:
    result = runner.invoke(app, [])
    assert result.exit_code == 3
    assert result.stdout.startswith("QueueActivity UNKNOWN:")
    api.assert_not_called()


def test_non_numeric_threshold_is_unknown(api) -> None:
    result = runner.invoke(app, ["-q", "a", "--warn", "many"])
    assert result.exit_code == 3
    assert "warn must be a number" in result.stdout
    api.assert_not_called()


def test_fetch_error_never_escapes(api) -> None:
    with mock.patch("rmq_queue_activity.probe.QueueActivityProbe.fetch_queues", side_effect=ProbeError("boom")):
        result = runner.invoke(app, ["-q", "a"])
    assert result.exit_code == 1
    assert result.stdout.strip() == "QueueActivity WARNING: could not get queue information"

from typing import Optional

import typer

from rmq_queue_activity.config import DEFAULT_CRITICAL, DEFAULT_WARN, ProbeConfig
from rmq_queue_activity.exceptions import ConfigError
from rmq_queue_activity.messages import Status, Verdict
from rmq_queue_activity.probe import QueueActivityProbe

CHECK_NAME = "QueueActivity"

app = typer.Typer(add_completion=False)


def render(verdict: Verdict) -> str:
    if verdict.messages:
        return f"{CHECK_NAME} {verdict.status.name}: {verdict.summary}"
    return f"{CHECK_NAME} {verdict.status.name}"


def _finish(verdict: Verdict) -> None:
    typer.echo(render(verdict))
    raise typer.Exit(code=int(verdict.status))


@app.command()
def check(
    queue: Optional[str] = typer.Option(None, "--queue", "-q", help="Comma separated queue names to monitor"),
    host: Optional[str] = typer.Option(None, "--host", "-h", help="Management API host [default: localhost]"),
    port: Optional[str] = typer.Option(None, "--port", "-p", help="Management API port [default: 55672]"),
    ssl: Optional[bool] = typer.Option(None, "--ssl", help="Use https for the management API"),
    user: Optional[str] = typer.Option(None, "--user", help="Management API user [default: guest]"),
    password: Optional[str] = typer.Option(None, "--password", help="Management API password [default: guest]"),
    vhost: Optional[str] = typer.Option(None, "--vhost", help="Only list queues of this vhost"),
    warn: str = typer.Option(str(DEFAULT_WARN), "--warn", "-w", help="WARNING rate threshold"),
    critical: str = typer.Option(str(DEFAULT_CRITICAL), "--critical", "-c", help="CRITICAL rate threshold"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Write debug logs to a file"),
    log_file: Optional[str] = typer.Option(None, "--log-file", help="Debug log file name"),
) -> None:
    """Check the combined ingress/egress rates of RabbitMQ queues."""
    try:
        config = ProbeConfig.from_options(
            queue,
            host=host,
            port=port,
            ssl=ssl,
            user=user,
            password=password,
            vhost=vhost,
            warn=warn,
            critical=critical,
            verbose=verbose,
            log_filename=log_file,
        )
    except ConfigError as e:
        _finish(Verdict(Status.UNKNOWN, (str(e),)))

    probe = QueueActivityProbe(config)
    _finish(probe.check())


def main() -> None:
    app()


if __name__ == "__main__":
    main()

# visitorinfo/cli.py
import json
from datetime import datetime

import click
from flask.cli import with_appcontext

from visitorinfo.services.visitors import latest_visitor
from visitorinfo.services.visitors_report import (
    format_summary, send_daily_visitors_report, visitors_summary,
)


@click.command("last-visitor")
@with_appcontext
def last_visitor_cmd():
    """Print the most recently collected visitor record."""
    rec = latest_visitor()
    if rec is None:
        click.echo("No visitor records yet.")
        return
    click.echo("Last collected user information:")
    click.echo(json.dumps(rec.to_dict(), indent=2))


@click.command("visitors-report")
@click.option("--date", "day", default=None, help="Day to report on (YYYY-MM-DD). Defaults to today (UTC).")
@click.option("--send/--no-send", default=False, help="Mail the report to REPORT_TO_EMAIL.")
@with_appcontext
def visitors_report_cmd(day, send):
    """Summarize one day's visits."""
    try:
        when = datetime.strptime(day, "%Y-%m-%d").date() if day else None
    except ValueError:
        raise click.BadParameter("expected YYYY-MM-DD", param_hint="--date")

    if send:
        body = send_daily_visitors_report(when)
    else:
        body = format_summary(visitors_summary(when))
    click.echo(body)


def register_cli(app):
    app.cli.add_command(last_visitor_cmd)
    app.cli.add_command(visitors_report_cmd)

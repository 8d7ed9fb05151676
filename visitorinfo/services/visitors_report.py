# visitorinfo/services/visitors_report.py
from datetime import datetime, date, time, timedelta, timezone

from sqlalchemy import func, desc
from flask import current_app

from visitorinfo.extensions import db
from visitorinfo.models.visitor import VisitorRecord
from visitorinfo.utils.mailer import send_mail


def _top(column, start, end, limit=5):
    return (
        db.session.query(column, func.count().label("n"))
        .filter(VisitorRecord.visited_at >= start, VisitorRecord.visited_at < end)
        .group_by(column)
        .order_by(desc("n"))
        .limit(limit)
        .all()
    )


def visitors_summary(day: date | None = None) -> dict:
    # visited_at is stored as naive UTC
    day = day or datetime.now(timezone.utc).date()
    start = datetime.combine(day, time.min)
    end = start + timedelta(days=1)

    window = (VisitorRecord.visited_at >= start, VisitorRecord.visited_at < end)
    total = db.session.query(func.count(VisitorRecord.id)).filter(*window).scalar() or 0
    unique = (
        db.session.query(func.count(func.distinct(VisitorRecord.ip_address)))
        .filter(*window)
        .scalar()
        or 0
    )
    return {
        "date": day,
        "total": total,
        "unique_ips": unique,
        "browsers": _top(VisitorRecord.browser, start, end),
        "os": _top(VisitorRecord.os_name, start, end),
        "devices": _top(VisitorRecord.device, start, end),
    }


def format_summary(summary: dict) -> str:
    lines = [f"Visitors for {summary['date']}",
             f"Total visits: {summary['total']}",
             f"Unique IPs: {summary['unique_ips']}"]
    for title, key in (("Top browsers", "browsers"), ("Top OS", "os"), ("Top devices", "devices")):
        lines += ["", f"{title}:"]
        for label, n in summary[key]:
            lines.append(f"  {n:>4}  {label or 'Unknown'}")
    return "\n".join(lines)


def send_daily_visitors_report(day: date | None = None) -> str:
    summary = visitors_summary(day)
    body = format_summary(summary)

    to_addr = current_app.config.get("REPORT_TO_EMAIL")
    if not to_addr:
        raise ValueError("REPORT_TO_EMAIL is not configured")
    send_mail(subject=f"[Visitor Info] Visitors {summary['date']}", recipients=[to_addr], body=body)
    current_app.logger.info("visitors report for %s sent to %s", summary["date"], to_addr)
    return body

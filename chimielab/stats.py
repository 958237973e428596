"""Learning statistics: study sessions, time summaries and test grades."""

from __future__ import annotations

from contextlib import closing
from datetime import datetime
from typing import Any

import pymysql

DEFAULT_HOST = "localhost"
DEFAULT_PORT = 3306
DEFAULT_USER = "root"
DEFAULT_DATABASE = "chimie_db"
PASSWORD = ""

TIME_FORMAT = "%Y-%m-%d %H:%M:%S"

_INSERT_SESSION = (
    "INSERT INTO sesiuni_invatare (username, start_time, end_time, durata_secunde) "
    "VALUES ({p}, {p}, {p}, {p})"
)
_TOTAL_SECONDS = "SELECT SUM(durata_secunde) FROM sesiuni_invatare WHERE username = {p}"
_ACTIVE_DAYS = (
    "SELECT COUNT(DISTINCT DATE(start_time)) FROM sesiuni_invatare WHERE username = {p}"
)
_GRADE_HISTORY = "SELECT data, nota FROM rezultate_teste WHERE user = {p} ORDER BY data"
_GRADES_FOR_TEST = (
    "SELECT nota, data FROM rezultate_teste WHERE user = {p} AND test = {p} "
    "ORDER BY data DESC"
)


def format_duration(seconds: int) -> str:
    """Return a duration in whole seconds as 'Hh Mm Ss'."""
    if seconds < 0:
        raise ValueError("Durata nu poate fi negativă.")
    hours, rest = divmod(int(seconds), 3600)
    minutes, secs = divmod(rest, 60)
    return f"{hours}h {minutes}m {secs}s"


def learning_summary(total_seconds: int, days: int) -> str:
    """Return the total learning time and the average per active day."""
    daily = total_seconds // days if days > 0 else 0
    return (
        f"Timp total învățare: {format_duration(total_seconds)}\n"
        f"Media zilnică: {format_duration(daily)}"
    )


def connect(
    host: str = DEFAULT_HOST,
    port: int = DEFAULT_PORT,
    user: str = DEFAULT_USER,
    password: str = PASSWORD,
    database: str = DEFAULT_DATABASE,
) -> Any:
    """Open a connection to the MariaDB/MySQL database holding the statistics."""
    return pymysql.connect(
        host=host,
        port=port,
        user=user,
        password=password,
        database=database,
        charset="utf8mb4",
    )


def _to_int(value: Any) -> int:
    if value is None:
        return 0
    if isinstance(value, (bytes, str)):
        text = value.decode() if isinstance(value, bytes) else value
        return int(float(text))
    return int(value)


def _to_text(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, bytes):
        return value.decode()
    if isinstance(value, datetime):
        return value.strftime(TIME_FORMAT)
    return str(value)


class LearningStore:
    """Reads and writes study sessions and grades through a DB-API connection."""

    def __init__(self, connection: Any, placeholder: str = "%s") -> None:
        self.connection = connection
        self.placeholder = placeholder

    def _query(self, template: str) -> str:
        return template.format(p=self.placeholder)

    def _fetchall(self, template: str, params: tuple) -> list[tuple]:
        with closing(self.connection.cursor()) as cursor:
            cursor.execute(self._query(template), params)
            return list(cursor.fetchall())

    def _scalar(self, template: str, params: tuple) -> int:
        rows = self._fetchall(template, params)
        return _to_int(rows[0][0]) if rows else 0

    def record_session(self, username: str, start: datetime, end: datetime) -> int:
        """Store a study session and return its length in whole seconds."""
        seconds = int((end - start).total_seconds())
        with closing(self.connection.cursor()) as cursor:
            cursor.execute(
                self._query(_INSERT_SESSION),
                (username, start.strftime(TIME_FORMAT), end.strftime(TIME_FORMAT), seconds),
            )
        self.connection.commit()
        return seconds

    def total_seconds(self, username: str) -> int:
        """Return the total time the user has spent learning, in seconds."""
        return self._scalar(_TOTAL_SECONDS, (username,))

    def active_days(self, username: str) -> int:
        """Return the number of distinct days on which the user studied."""
        return self._scalar(_ACTIVE_DAYS, (username,))

    def summary_text(self, username: str) -> str:
        """Return the dashboard summary for the user."""
        return learning_summary(self.total_seconds(username), self.active_days(username))

    def grade_history(self, username: str) -> list[tuple[str, int]]:
        """Return (date, grade) pairs of all the user's tests, oldest first."""
        rows = self._fetchall(_GRADE_HISTORY, (username,))
        return [(_to_text(date), _to_int(grade)) for date, grade in rows]

    def grades_for_test(self, username: str, test: str) -> list[tuple[str, str]]:
        """Return (grade, date) pairs for one test, newest first."""
        rows = self._fetchall(_GRADES_FOR_TEST, (username, test))
        return [(_to_text(grade), _to_text(date)) for grade, date in rows]
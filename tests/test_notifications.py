import io
import logging

import pytest
from rich.console import Console

from library_catalog.book import Book
from library_catalog.services.notification_service import (
    ConsoleNotificationChannel,
    LoggingNotificationChannel,
    NotificationChannel,
    build_notification_channel,
)
from library_catalog.services.subscribers import LoggingSubscriber, Member, Subscriber


def _console():
    return Console(file=io.StringIO(), width=200)


def test_capabilities_are_abstract():
    with pytest.raises(TypeError):
        NotificationChannel()
    with pytest.raises(TypeError):
        Subscriber()


def test_console_channel_prints_recipient_and_message():
    console = _console()
    ConsoleNotificationChannel(console).send_notification("user01", "You have borrowed the book [1984]")

    output = console.file.getvalue()
    assert "Sending email to user01:" in output
    assert "You have borrowed the book [1984]" in output


def test_logging_channel_logs_notification(caplog):
    with caplog.at_level(logging.INFO, logger="library_catalog"):
        LoggingNotificationChannel().send_notification("user02", "hello")
    assert "Notification for user02: hello" in caplog.text


def test_build_notification_channel():
    console = _console()
    channel = build_notification_channel("Console", console)
    assert isinstance(channel, ConsoleNotificationChannel)
    assert channel.console is console
    assert isinstance(build_notification_channel("log"), LoggingNotificationChannel)


def test_build_unknown_channel_raises():
    with pytest.raises(ValueError, match="Unknown notification channel"):
        build_notification_channel("carrier-pigeon")


def test_member_prints_new_book_title():
    console = _console()
    member = Member("user01", console)
    member.update(Book("El Gran Gatsby", "F. Scott Fitzgerald", "123456789"))

    output = console.file.getvalue()
    assert "User user01 has been notified about the new book: El Gran Gatsby" in output


def test_logging_subscriber(caplog):
    with caplog.at_level(logging.INFO, logger="library_catalog"):
        LoggingSubscriber().update(Book("1984", "George Orwell", "987654321"))
    assert "New book cataloged: 1984 by George Orwell (ISBN: 987654321)" in caplog.text

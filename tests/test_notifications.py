"""Tests for notification sinks"""
import logging

from storefront.notifications import (
    LoggingNotifier,
    Notification,
    NotificationCollector,
    NotificationVariant,
)


def test_collector_drain():
    """Drain returns pending notifications once"""
    collector = NotificationCollector()
    collector(Notification(title="Added to cart", description="Premium Widget added to cart"))

    drained = collector.drain()

    assert len(drained) == 1
    assert drained[0].title == "Added to cart"
    assert collector.drain() == []


def test_notification_to_dict():
    notification = Notification(
        title="Error",
        description="Please select at least one product",
        variant=NotificationVariant.DESTRUCTIVE,
    )

    assert notification.to_dict() == {
        "title": "Error",
        "description": "Please select at least one product",
        "variant": "destructive",
    }


def test_logging_notifier_levels(caplog):
    """Destructive toasts are logged as warnings"""
    notifier = LoggingNotifier("storefront.test")

    with caplog.at_level(logging.INFO, logger="storefront.test"):
        notifier(Notification(title="Order Placed!", description="Total amount: $10.00"))
        notifier(Notification(
            title="Error",
            description="Please select at least one product",
            variant=NotificationVariant.DESTRUCTIVE,
        ))

    levels = [record.levelno for record in caplog.records]
    assert levels == [logging.INFO, logging.WARNING]
    assert "Total amount: $10.00" in caplog.records[0].getMessage()


def test_engine_with_logging_notifier(two_item_catalog, caplog):
    from storefront.cart import CartEngine

    engine = CartEngine(two_item_catalog, notifier=LoggingNotifier("storefront.toasts"))

    with caplog.at_level(logging.INFO, logger="storefront.toasts"):
        engine.checkout()

    assert any("Please select at least one product" in r.getMessage() for r in caplog.records)

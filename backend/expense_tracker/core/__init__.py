"""Core services for the expense tracker."""

from .notification_service import (
    ExpenseNotifier,
    DeliveryResult,
    NotificationReport,
    build_report_message,
)

__all__ = [
    "ExpenseNotifier",
    "DeliveryResult",
    "NotificationReport",
    "build_report_message",
]

"""
Notification Service - Expense report emails.

Responsibilities:
- Email every registered user after a new expense is added
- Compare total spend against each user's limit
- Record the outcome per recipient without failing the triggering request

Note: the total is summed over ALL expenses, not the recipient's own, and
that global figure is compared with each user's individual limit.
TODO: switch to a per-user total (match on userEmail) once expenses are
reliably tagged with their owner.
"""
import logging
from dataclasses import dataclass, field
from typing import Optional, List

from flask_mail import Message
from pymongo.errors import PyMongoError

logger = logging.getLogger(__name__)


def format_amount(value) -> str:
    """Render 100.0 as ``100`` and 12.5 as ``12.5``."""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def build_report_message(total, expense_limit) -> str:
    total_text = format_amount(total)
    limit_text = format_amount(expense_limit)
    if total > expense_limit:
        return f"⚠️ Warning: You exceeded ₹{limit_text}. Your current total is ₹{total_text}."
    return f"✅ Good Job: You're within your ₹{limit_text} limit. Total: ₹{total_text}."


@dataclass
class DeliveryResult:
    recipient: Optional[str]
    ok: bool
    error: Optional[str] = None


@dataclass
class NotificationReport:
    results: List[DeliveryResult] = field(default_factory=list)
    error: Optional[str] = None

    @property
    def sent(self) -> List[DeliveryResult]:
        return [r for r in self.results if r.ok]

    @property
    def failed(self) -> List[DeliveryResult]:
        return [r for r in self.results if not r.ok]

    @property
    def ok(self) -> bool:
        return self.error is None and not self.failed


class ExpenseNotifier:
    """Sends the spend-vs-limit summary to every user, one at a time."""

    def __init__(self, mail, sender: Optional[str], subject: str = "Expense Update"):
        self.mail = mail
        self.sender = sender
        self.subject = subject

    def send_expense_report(self, expense_store, user_store) -> NotificationReport:
        """
        Email each user their status and return what happened.

        Never raises: database, data and mail failures are logged and
        recorded on the returned report.
        """
        report = NotificationReport()
        try:
            users = user_store.list_all()
        except Exception as exc:  # bad user documents included
            logger.error("[Notifier] Could not load users: %s", exc)
            report.error = str(exc)
            return report

        for user in users:
            report.results.append(self._notify(user, expense_store))

        if report.failed:
            logger.warning(
                "[Notifier] %d of %d expense reports failed: %s",
                len(report.failed),
                len(report.results),
                ", ".join(str(r.recipient) for r in report.failed),
            )
        return report

    def _notify(self, user, expense_store) -> DeliveryResult:
        recipient = user.email
        try:
            total = expense_store.total_amount()
            logger.info("[Notifier] Total Expense: ₹%s", format_amount(total))

            message = Message(
                subject=self.subject,
                sender=self.sender,
                recipients=[recipient],
                body=build_report_message(total, user.expenseLimit),
            )
            self.mail.send(message)
        except PyMongoError as exc:
            logger.error("[Notifier] Could not total expenses for %s: %s", recipient, exc)
            return DeliveryResult(recipient=recipient, ok=False, error=str(exc))
        except Exception as exc:  # mail transport or malformed user record
            logger.error("[Notifier] Error sending expense report to %s: %s", recipient, exc)
            return DeliveryResult(recipient=recipient, ok=False, error=str(exc))

        logger.info("[Notifier] Email sent to %s", recipient)
        return DeliveryResult(recipient=recipient, ok=True)

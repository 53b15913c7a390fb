"""
Audit Logger

DESIGN DECISION: Every significant action in the tracker is logged.
This provides:
1. Traceability of adds and deletes
2. Debugging capability when stored data cannot be read
3. A history of declined deletions and rejected drafts

The audit logger writes structured JSON lines through structlog and
never touches the expense storage.
"""

import logging

import structlog

from expense_tracker.models.audit import AuditEvent, AuditEventBuilder, AuditSeverity


# Configure structlog for local logging
structlog.configure(
    processors=[
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
        structlog.processors.JSONRenderer()
    ],
    wrapper_class=structlog.stdlib.BoundLogger,
    context_class=dict,
    logger_factory=structlog.stdlib.LoggerFactory(),
    cache_logger_on_first_use=True,
)


def configure_logging(level: str = "INFO") -> None:
    """Route structlog output through the standard library at `level`."""
    logging.basicConfig(format="%(message)s", level=getattr(logging, level.upper()))


class AuditLogger:
    """
    Central audit logging service.

    Each helper builds an AuditEvent and logs it at the level matching
    its severity.
    """

    def __init__(self, logger_name: str = "expense_tracker.audit"):
        self._logger = structlog.get_logger(logger_name)

    def log(self, event: AuditEvent) -> None:
        """Log an audit event."""
        log_dict = event.to_log_dict()

        if event.severity == AuditSeverity.ERROR:
            self._logger.error("audit_event", **log_dict)
        elif event.severity == AuditSeverity.WARNING:
            self._logger.warning("audit_event", **log_dict)
        elif event.severity == AuditSeverity.DEBUG:
            self._logger.debug("audit_event", **log_dict)
        else:
            self._logger.info("audit_event", **log_dict)

    def log_store_loaded(self, count: int, key: str) -> None:
        self.log(AuditEventBuilder.store_loaded(count=count, key=key))

    def log_store_load_failed(self, key: str, reason: str) -> None:
        self.log(AuditEventBuilder.store_load_failed(key=key, reason=reason))

    def log_store_reset(self, key: str, reason: str) -> None:
        self.log(AuditEventBuilder.store_reset(key=key, reason=reason))

    def log_store_written(self, count: int, key: str) -> None:
        self.log(AuditEventBuilder.store_written(count=count, key=key))

    def log_expense_added(self, expense_id: int, category: str, amount: float) -> None:
        """Log a successful add."""
        self.log(AuditEventBuilder.expense_added(
            expense_id=expense_id,
            category=category,
            amount=amount,
        ))

    def log_expense_rejected(self, issues: list[dict]) -> None:
        """Log a draft that failed validation."""
        self.log(AuditEventBuilder.expense_rejected(issues=issues))

    def log_delete_requested(self, expense_id: int) -> None:
        self.log(AuditEventBuilder.delete_requested(expense_id=expense_id))

    def log_delete_confirmed(self, expense_id: int, removed: bool) -> None:
        self.log(AuditEventBuilder.delete_confirmed(expense_id=expense_id, removed=removed))

    def log_delete_declined(self, expense_id: int) -> None:
        self.log(AuditEventBuilder.delete_declined(expense_id=expense_id))


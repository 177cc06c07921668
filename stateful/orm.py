"""SQLAlchemy-backed stateful entities."""

from __future__ import annotations

import logging
from typing import Any

from sqlalchemy.orm import Session

logger = logging.getLogger(__name__)


class ColumnStateful:
    """Keeps the state of a mapped instance in one of its columns.

    ``set_state`` commits the session. If the commit fails the session is rolled
    back, which expires the instance so its previous state is reloaded on the
    next read, and the original error is re-raised.
    """

    def __init__(self, session: Session, instance: Any, attribute: str = "status") -> None:
        self.session = session
        self.instance = instance
        self.attribute = attribute

    def state(self) -> Any:
        return getattr(self.instance, self.attribute)

    def set_state(self, state: Any) -> None:
        setattr(self.instance, self.attribute, state)
        try:
            self.session.commit()
        except Exception:
            self.session.rollback()
            logger.warning(
                "stateful.orm.commit_failed",
                extra={"event": "stateful.orm.commit_failed", "to_state": state},
            )
            raise

    def __repr__(self) -> str:
        return f"ColumnStateful({type(self.instance).__name__}.{self.attribute})"

"""Loads a TicketPolicy from a JSON file.

The file uses the same shape as ``TicketPolicy.to_dict()``::

    {
      "maximumTickets": 20,
      "ticketTypes": {"ADULT": {"price": 2000, "seatAllocation": 1}, ...},
      "currency": "GBP",
      "minorUnitsPerMajor": 100
    }
"""

from __future__ import annotations

import json
import logging
from pathlib import Path

from ticketing.domain.exceptions import InvalidPolicyError
from ticketing.domain.model.policy import TicketPolicy

logger = logging.getLogger(__name__)


class JsonPolicyLoader:

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path

    def load(self) -> TicketPolicy:
        try:
            raw = json.loads(self._file_path.read_text(encoding="utf-8"))
        except OSError as exc:
            raise InvalidPolicyError(
                f"Cannot read policy file {self._file_path}: {exc.strerror}"
            ) from exc
        except json.JSONDecodeError as exc:
            raise InvalidPolicyError(
                f"Policy file {self._file_path} is not valid JSON: {exc.msg}"
            ) from exc

        policy = TicketPolicy.from_dict(raw)
        logger.debug("Loaded ticket policy from %s", self._file_path)
        return policy

    def save(self, policy: TicketPolicy) -> None:
        self._file_path.parent.mkdir(parents=True, exist_ok=True)
        self._file_path.write_text(
            json.dumps(policy.to_dict(), indent=2) + "\n", encoding="utf-8"
        )

"""PRD document loading from JSON files."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from prdcheck.core.contracts.exceptions import PrdLoadError

logger = logging.getLogger(__name__)


class PrdLoader:
    """Read a PRD file and return its parsed JSON value.

    Only read and parse failures are reported here; the document shape is
    left to :class:`~prdcheck.core.prd.validator.BacklogValidator`.
    """

    def load(self, path: Path) -> Any:
        if not path.exists():
            raise PrdLoadError(f"prd file not found: {path}")
        if not path.is_file():
            raise PrdLoadError(f"prd path is not a file: {path}")
        try:
            text = path.read_text(encoding="utf-8")
        except OSError as exc:
            raise PrdLoadError(f"failed reading prd file: {path}") from exc
        except UnicodeDecodeError as exc:
            raise PrdLoadError(f"prd file is not valid UTF-8: {path}") from exc
        try:
            payload = json.loads(text)
        except json.JSONDecodeError as exc:
            raise PrdLoadError(f"invalid JSON in prd file: {path}") from exc
        logger.debug("loaded prd document from %s", path)
        return payload

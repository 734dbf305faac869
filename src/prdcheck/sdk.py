"""SDK composition root for prdcheck."""

from __future__ import annotations

from pathlib import Path
from typing import Any

from prdcheck.core.compaction import CompactionChecker
from prdcheck.core.config import default_config
from prdcheck.core.contracts.config import PrdCheckConfig
from prdcheck.core.contracts.result import CompactionReport, ValidationResult
from prdcheck.core.prd import BacklogValidator, PrdLoader


def load_prd(path: str | Path) -> Any:
    """Read and parse a PRD file without validating it."""
    return PrdLoader().load(Path(path))


def read_and_validate(path: str | Path) -> ValidationResult:
    """Load a PRD file and validate it.

    Raises:
        PrdLoadError: If the file cannot be read or is not valid JSON.
        PrdValidationError: If the document violates a backlog invariant.
    """
    return BacklogValidator().validate(load_prd(path))


class PrdCheck:
    """prdcheck SDK public API."""

    def __init__(
        self,
        *,
        config: PrdCheckConfig,
        loader: PrdLoader | None = None,
        validator: BacklogValidator | None = None,
    ) -> None:
        self._config = config
        self._loader = loader or PrdLoader()
        self._validator = validator or BacklogValidator()

    @classmethod
    def from_config(cls, config: PrdCheckConfig | None = None) -> PrdCheck:
        return cls(config=config or default_config())

    @property
    def config(self) -> PrdCheckConfig:
        return self._config

    def validate(self, document: Any | None = None) -> ValidationResult:
        """Validate ``document``, or the configured PRD file when omitted."""
        if document is None:
            document = self._loader.load(self._config.paths.prd)
        return self._validator.validate(document)

    def check_compaction(self) -> CompactionReport:
        return CompactionChecker(self._config, loader=self._loader, validator=self._validator).check()

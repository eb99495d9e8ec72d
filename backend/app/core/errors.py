"""
Error types - 错误类型
"""
import logging
from typing import Sequence

from fastapi import Request
from fastapi.responses import PlainTextResponse

logger = logging.getLogger(__name__)


class MissingParameterError(Exception):
    """One or more required query parameters are absent or empty."""

    def __init__(self, names: Sequence[str]):
        self.names = list(names)
        super().__init__(f"missing required query parameter(s): {', '.join(self.names)}")


class DatasetIntegrityError(ValueError):
    """The mock dataset does not form a valid school hierarchy."""


async def missing_parameter_handler(request: Request, exc: MissingParameterError):
    logger.warning("Rejected %s: missing %s", request.url.path, ", ".join(exc.names))
    return PlainTextResponse(str(exc), status_code=400)

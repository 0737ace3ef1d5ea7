"""Base resource helpers."""

from __future__ import annotations

from typing import Any, Mapping, Optional, TYPE_CHECKING

from ..errors import InvalidTagError
from ..utils import clean_tag, validate_tag

if TYPE_CHECKING:  # pragma: no cover
    from ..client import BrawlAPI


class Resource:
    """Shared helpers for resource classes."""

    def __init__(self, client: "BrawlAPI") -> None:
        self._client = client

    @property
    def _logger(self):
        return self._client._logger

    def _get(
        self,
        endpoint: str,
        *,
        params: Optional[Mapping[str, Any]] = None,
        timeout: Optional[int] = None,
    ) -> Any:
        return self._client.request(endpoint, params=params, timeout=timeout)

    def _clean_tag(self, tag: object) -> str:
        """Validate ``tag`` and return it in the form the API expects.

        Raises
        ------
        InvalidTagError
            If the tag fails validation.
        """
        if not validate_tag(tag, strict=self._client.strict_tags):
            self._logger.warning("Invalid tag: %r", tag)
            raise InvalidTagError(tag)
        return clean_tag(tag)  # type: ignore[arg-type]

from abc import ABC, abstractmethod
from typing import Any

from cf_ratelimits.schemas.envelope import APIEnvelope


class AbstractAPITransport(ABC):
	"""Interface for the component that performs raw API calls.

	Implementations own base URL resolution, authentication headers and
	envelope parsing. Resources only build paths and decode ``result``.
	"""

	@abstractmethod
	async def call(
		self,
		method: str,
		path: str,
		*,
		payload: dict[str, Any] | None = None,
		params: dict[str, Any] | None = None,
	) -> APIEnvelope:
		"""Perform one API call and return the parsed envelope.

		Args:
			method: HTTP verb (GET, POST, PUT, DELETE).
			path: Path relative to the versioned API base URL.
			payload: Optional JSON request body.
			params: Optional query string parameters.

		Returns:
			APIEnvelope: The parsed envelope of a successful call.

		Raises:
			TransportError: If the request fails or the body is not an envelope.
			APIError: If the envelope reports ``success: false``.
		"""
		...

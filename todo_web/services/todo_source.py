# todo_web/services/todo_source.py

import logging
from typing import List, Optional

import httpx
from pydantic import TypeAdapter, ValidationError

from ..errors import DataFetchError
from ..models import Todo

_todo_list = TypeAdapter(List[Todo])


class HttpTodoSource:
    """Fetches to-dos from a JSONPlaceholder-style REST service."""

    def __init__(self, base_url: str, timeout: float = 10.0, transport: Optional[httpx.AsyncBaseTransport] = None):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._transport = transport

    async def fetch_todos(self, user_id: int) -> List[Todo]:
        url = f"{self.base_url}/todos"
        params = {"userId": user_id}
        logging.debug(f"Fetching todos from {url} for user {user_id}")

        async with httpx.AsyncClient(timeout=self.timeout, transport=self._transport) as client:
            try:
                response = await client.get(url, params=params)
                response.raise_for_status()  # 4xx / 5xx
                payload = response.json()
            except httpx.HTTPStatusError as e:
                logging.warning(f"Todo service answered {e.response.status_code} for {url}")
                raise DataFetchError(
                    f"Todo service request failed with status {e.response.status_code}"
                ) from e
            except httpx.RequestError as e:
                logging.warning(f"Todo service unreachable at {e.request.url}: {e}")
                raise DataFetchError(f"An error occurred while requesting {e.request.url}: {e}") from e
            except ValueError as e:
                logging.warning(f"Todo service sent invalid JSON: {e}")
                raise DataFetchError("Todo service returned invalid JSON") from e

        try:
            return _todo_list.validate_python(payload)
        except ValidationError as e:
            raise DataFetchError(f"Todo service returned an unexpected payload: {e}") from e

"""Backend collaborators for the transaction store.

``TransactionsAPI`` talks to the REST collection over HTTP using
``requests``; ``MockTransactionsAPI`` keeps an in-memory copy of a seed
list so the dashboard can run without a live backend.  Both expose the
same three calls and raise :class:`~budget_buddy.models.NetworkFailure`
or :class:`~budget_buddy.models.DecodeFailure` on failure.
"""

from __future__ import annotations

import time
from typing import Any, Callable, Dict, Iterable, List, Optional

import requests
from loguru import logger
from requests.exceptions import RequestException

from . import config
from .models import DecodeFailure, NetworkFailure, NewTransaction, Transaction

INITIAL_MOCK_DATA: List[Dict[str, Any]] = [
    {
        '_id': '1',
        'description': 'Freelance Work',
        'amount': 1200,
        'type': 'income',
        'category': 'Salary',
        'date': '2023-10-01',
    },
    {
        '_id': '2',
        'description': 'Grocery Run',
        'amount': 85.50,
        'type': 'expense',
        'category': 'Food',
        'date': '2023-10-02',
    },
]


class TransactionsAPI:
    """REST client for the ``/transactions`` collection."""

    def __init__(
        self,
        base_url: Optional[str] = None,
        *,
        timeout: Optional[float] = None,
        session: Optional[requests.Session] = None,
    ):
        self.base_url = (base_url or config.get_api_url()).rstrip('/')
        self.timeout = config.REQUEST_TIMEOUT if timeout is None else timeout
        self.session = session or requests.Session()
        self.headers = {'Content-Type': 'application/json'}

    def _request(self, method: str, url: str, **kwargs) -> requests.Response:
        try:
            response = self.session.request(method, url, timeout=self.timeout, **kwargs)
            response.raise_for_status()
        except RequestException as exc:
            raise NetworkFailure(f"{method} {url} failed: {exc}") from exc
        return response

    @staticmethod
    def _decode(response: requests.Response) -> Any:
        try:
            return response.json()
        except ValueError as exc:
            raise DecodeFailure(f"Response from {response.url} is not valid JSON") from exc

    def list_transactions(self) -> List[Transaction]:
        """Fetch the full collection, in the order the backend returns it."""
        payload = self._decode(self._request('GET', self.base_url))
        if not isinstance(payload, list):
            raise DecodeFailure(f"Expected a JSON array, got {type(payload).__name__}")
        return [Transaction.from_wire(item) for item in payload]

    def create_transaction(self, new: NewTransaction) -> Transaction:
        """Persist ``new`` and return the stored record with its assigned id."""
        response = self._request('POST', self.base_url, json=new.to_wire(), headers=self.headers)
        return Transaction.from_wire(self._decode(response))

    def delete_transaction(self, transaction_id: str) -> None:
        self._request('DELETE', f"{self.base_url}/{transaction_id}")


class MockTransactionsAPI:
    """In-memory stand-in for the REST collection.

    Only ``list_transactions`` sleeps for ``latency`` seconds, mirroring a
    slow first load.  Ids for created records come from the current time
    in milliseconds.
    """

    def __init__(
        self,
        seed: Optional[Iterable[Dict[str, Any]]] = None,
        *,
        latency: Optional[float] = None,
        clock: Callable[[], float] = time.time,
        sleep: Callable[[float], None] = time.sleep,
    ):
        records = INITIAL_MOCK_DATA if seed is None else seed
        self._records: List[Transaction] = [Transaction.from_wire(item) for item in records]
        self.latency = config.MOCK_LATENCY_SECONDS if latency is None else latency
        self._clock = clock
        self._sleep = sleep

    def _next_id(self) -> str:
        return str(int(self._clock() * 1000))

    def list_transactions(self) -> List[Transaction]:
        if self.latency > 0:
            logger.debug(f"Mock backend sleeping {self.latency:.2f}s before listing")
            self._sleep(self.latency)
        return list(self._records)

    def create_transaction(self, new: NewTransaction) -> Transaction:
        record = Transaction(id=self._next_id(), **new.to_wire())
        self._records.insert(0, record)
        return record

    def delete_transaction(self, transaction_id: str) -> None:
        self._records = [t for t in self._records if t.id != transaction_id]


def build_api(use_mock: Optional[bool] = None, api_url: Optional[str] = None):
    """Return the backend selected by configuration (or the arguments)."""
    if use_mock is None:
        use_mock = config.use_mock_data()
    if use_mock:
        logger.info("Using in-memory mock backend")
        return MockTransactionsAPI()
    url = api_url or config.get_api_url()
    logger.info(f"Using REST backend at {url}")
    return TransactionsAPI(url)

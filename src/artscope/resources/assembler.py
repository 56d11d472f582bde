"""Batch list assembly: one query, one fetch, one hydrated record per returned element."""

import asyncio
from typing import Any, Dict, List, Optional, Sequence, Tuple, Union

from pydantic import BaseModel, Field, computed_field

from artscope.config.loader import Settings
from artscope.errors import InvalidArgument
from artscope.retrieval.fetcher import FetchFn, fetch_envelope
from artscope.retrieval.query_urls import ResourceKind, build_query_url, coerce_kind
from artscope.utils.logging import get_logger

from .hydrator import HYDRATABLE_KINDS, ImageResolver, Resource, ResourceHydrator
from .models import Artist, Artwork, Exhibition

logger = get_logger(__name__)


class ElementFailure(BaseModel):
    """One element of a batch that could not be hydrated."""
    index: int  # position in the fetched data list
    resource_id: Optional[Union[int, str]] = None
    error_type: str
    message: str


class BatchResult(BaseModel):
    """Partial-result form of a batch assembly."""

    kind: ResourceKind
    url: str
    items: List[Union[Artwork, Artist, Exhibition]] = Field(default_factory=list)
    failures: List[ElementFailure] = Field(default_factory=list)

    @computed_field
    @property
    def status(self) -> str:
        """SUCCESS | PARTIAL | FAILURE"""
        if not self.failures:
            return "SUCCESS"
        return "PARTIAL" if self.items else "FAILURE"


class ResourceAssembler:
    """Builds, fetches and hydrates lists of collection resources."""

    def __init__(self, fetch: Any, settings: Optional[Settings] = None):
        """
        Initialize assembler.

        Args:
            fetch: Async callable url -> JSON, or an object exposing one as .fetch
                (e.g. ApiFetcher)
            settings: Optional settings. Defaults to built-in Settings.
        """
        self.fetch: FetchFn = fetch.fetch if hasattr(fetch, "fetch") else fetch
        self.settings = settings or Settings()
        self.base_url = self.settings.api.base_url
        self.max_concurrency = self.settings.hydration.max_concurrency

        self.image_resolver = ImageResolver(
            self.fetch,
            width=self.settings.images.width,
            base_url=self.base_url,
        )
        self.hydrator = ResourceHydrator(
            resolve_image=self.image_resolver.resolve,
            resolve_known_works=self.resolve_known_works,
        )

    async def resolve_known_works(self, artist_id: int) -> List[Artwork]:
        """Return up to one search page of artworks attributed to artist_id."""
        url = build_query_url(ResourceKind.ARTWORK_BY_ARTIST, [artist_id], base_url=self.base_url)
        envelope = await fetch_envelope(self.fetch, url)
        artwork_ids = [record["id"] for record in envelope.data if record.get("id") is not None]

        if not artwork_ids:
            logger.debug(f"No known works for artist {artist_id}")
            return []
        return await self.assemble_resources(ResourceKind.ARTWORK, artwork_ids)

    async def _fetch_records(
        self,
        kind: Union[ResourceKind, str],
        ids: Sequence[Union[int, str]],
    ) -> Tuple[ResourceKind, str, List[Dict[str, Any]]]:
        kind = coerce_kind(kind)
        if kind not in HYDRATABLE_KINDS:
            raise InvalidArgument(f"Resource kind '{kind.value}' cannot be assembled")

        url = build_query_url(kind, ids, base_url=self.base_url)
        envelope = await fetch_envelope(self.fetch, url)
        logger.info(f"Fetched {len(envelope.data)} {kind.value} records for {len(ids)} ids")
        return kind, url, envelope.data

    def _hydrate_tasks(self, kind: ResourceKind, records: List[Dict[str, Any]]) -> List[asyncio.Task]:
        # Per-call semaphore: nested assemblies (known works) never wait on an outer slot
        semaphore = asyncio.Semaphore(self.max_concurrency)

        async def _hydrate_one(record: Dict[str, Any]) -> Resource:
            async with semaphore:
                return await self.hydrator.hydrate(kind, record)

        return [asyncio.create_task(_hydrate_one(record)) for record in records]

    async def _hydrate_all(self, kind: ResourceKind, records: List[Dict[str, Any]]) -> List[Any]:
        """Hydrate every element; failures are returned in place of records."""
        return await asyncio.gather(*self._hydrate_tasks(kind, records), return_exceptions=True)

    async def _hydrate_fail_fast(self, kind: ResourceKind, records: List[Dict[str, Any]]) -> List[Resource]:
        """Hydrate elements, cancelling the rest of the batch on the first failure."""
        if self.max_concurrency == 1 or len(records) <= 1:
            return [await self.hydrator.hydrate(kind, record) for record in records]

        tasks = self._hydrate_tasks(kind, records)
        done, pending = await asyncio.wait(tasks, return_when=asyncio.FIRST_EXCEPTION)
        for task in pending:
            task.cancel()
        if pending:
            await asyncio.gather(*pending, return_exceptions=True)

        # First failure in element order among the finished tasks
        failures = [task.exception() for task in tasks if task in done]
        for failure in failures:
            if failure is not None:
                raise failure
        return [task.result() for task in tasks]

    async def assemble_resources(
        self,
        kind: Union[ResourceKind, str],
        ids: Sequence[Union[int, str]],
    ) -> List[Resource]:
        """
        Fetch and hydrate the resources for ids.

        Order follows the fetched data list, not ids. The first failure cancels
        the elements still in flight and is raised.

        Raises:
            InvalidArgument: If ids is empty or kind cannot be hydrated
            SchemaViolation: If any element fails validation (first in order)
            TransportError: If any fetch fails
        """
        kind, _url, records = await self._fetch_records(kind, ids)
        return await self._hydrate_fail_fast(kind, records)

    async def assemble_batch(
        self,
        kind: Union[ResourceKind, str],
        ids: Sequence[Union[int, str]],
    ) -> BatchResult:
        """
        Like assemble_resources, but element failures are collected instead of raised.

        The primary fetch still raises on failure since there is nothing to return.
        """
        kind, url, records = await self._fetch_records(kind, ids)
        results = await self._hydrate_all(kind, records)

        batch = BatchResult(kind=kind, url=url)
        for index, (record, result) in enumerate(zip(records, results)):
            if isinstance(result, Exception):
                batch.failures.append(ElementFailure(
                    index=index,
                    resource_id=record.get("id"),
                    error_type=type(result).__name__,
                    message=str(result),
                ))
            elif isinstance(result, BaseException):
                raise result
            else:
                batch.items.append(result)

        if batch.failures:
            logger.warning(
                f"Failed to hydrate {len(batch.failures)} of {len(records)} {kind.value} records"
            )
        return batch

"""Core orchestration: wire services, scan documents, wait for lookups."""

from __future__ import annotations

import logging
from concurrent.futures import as_completed

from bs4 import BeautifulSoup
from tqdm import tqdm

from .collection import Collection
from .config import ClientConfig
from .errors import SeeAlsoError
from .io_html import read_document, write_document
from .models import MatchTask
from .response import ResultSet
from .service import Service
from .transport import JsonpTransport, make_session
from .view import make_renderer


def build_transport(config: ClientConfig, *, logger: logging.Logger) -> JsonpTransport:
    return JsonpTransport(
        make_session(config.user_agent),
        workers=config.workers,
        timeout=config.request_timeout,
        logger=logger,
    )


def build_collection(
    config: ClientConfig, *, transport: JsonpTransport, logger: logging.Logger
) -> Collection:
    """Register every configured service and view, in configuration order."""
    collection = Collection(
        make_renderer(config.default_view, max_items=config.max_items), logger=logger
    )
    for name, url in config.services:
        collection.add_service(name, Service(url, transport, logger=logger))
    for name, flavour in config.views:
        collection.add_view(name, make_renderer(flavour, max_items=config.max_items))
    return collection


def render_document(
    document: BeautifulSoup,
    *,
    collection: Collection,
    transport: JsonpTransport,
    show_progress: bool,
    logger: logging.Logger,
) -> list[MatchTask]:
    """Replace all marked tags in ``document`` and block until every lookup settles."""
    tasks = collection.replace_tags(document)
    logger.info("Matched %d elements", len(tasks))

    futures = transport.drain()
    iterator = as_completed(futures)
    if show_progress:
        iterator = tqdm(iterator, total=len(futures), desc="resolving lookups")
    failed = 0
    for future in iterator:
        try:
            future.result()
        except (SeeAlsoError, ValueError) as exc:
            failed += 1
            logger.warning("Lookup failed: %s", exc)
    if failed:
        logger.info("%d of %d lookups left their elements unchanged", failed, len(futures))
    return tasks


def lookup(service: Service, identifier: str, *, transport: JsonpTransport) -> ResultSet:
    """Query one identifier and wait for its response.

    Transport and payload errors propagate to the caller.
    """
    received: list[ResultSet] = []
    service.query(identifier, received.append)
    for future in transport.drain():
        future.result()
    return received[0] if received else ResultSet(identifier=identifier)


def run_lookup(
    config: ClientConfig, identifier: str, *, logger: logging.Logger
) -> tuple[ResultSet, str]:
    """Look up ``identifier`` at the first configured service and render it."""
    transport = build_transport(config, logger=logger)
    try:
        name, url = config.services[0]
        logger.debug("Looking up %r at %s (%s)", identifier, url, name)
        result = lookup(Service(url, transport, logger=logger), identifier, transport=transport)
    finally:
        transport.close()
    view = make_renderer(config.default_view, max_items=config.max_items)
    return result, view.render(result)


def run_pipeline(config: ClientConfig, *, logger: logging.Logger) -> str:
    """Read the input document, resolve all lookups, and write the output document."""
    if not config.input or not config.output:
        raise SeeAlsoError("Both an input and an output document are required.")
    document = read_document(config.input)
    transport = build_transport(config, logger=logger)
    try:
        collection = build_collection(config, transport=transport, logger=logger)
        render_document(
            document,
            collection=collection,
            transport=transport,
            show_progress=config.show_progress,
            logger=logger,
        )
    finally:
        transport.close()
    write_document(config.output, document)
    return config.output

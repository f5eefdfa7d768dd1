import pytest

from resume_filter.config.settings import Settings
from resume_filter.container import Container, configure_container
from resume_filter.core.models.document import DocumentStore
from resume_filter.core.protocols.extractor import TextExtractorProtocol
from resume_filter.core.services.ingest_service import IngestService
from resume_filter.core.services.search_service import SearchService
from resume_filter.infrastructure.extractors.pdf_extractor import PDFTextExtractor
from resume_filter.presentation.formatting import (
    EMPTY_STORE_MESSAGE,
    NO_MATCHES_MESSAGE,
    match_badge,
    render_view,
)
from tests.helpers import make_store


def test_container_resolves_configured_services() -> None:
    container = configure_container(Settings(extraction_timeout=5.0), Container())

    extractor = container.resolve(TextExtractorProtocol)

    assert isinstance(extractor, PDFTextExtractor)
    assert isinstance(extractor, TextExtractorProtocol)
    assert container.resolve(IngestService) is container.resolve(IngestService)
    assert isinstance(container.resolve(SearchService), SearchService)


def test_container_unknown_interface() -> None:
    with pytest.raises(KeyError):
        Container().resolve(SearchService)


def test_container_non_singleton_builds_fresh_instances() -> None:
    container = Container()
    container.register(SearchService, SearchService)
    assert container.resolve(SearchService) is not container.resolve(SearchService)


def test_match_badge() -> None:
    assert match_badge(0) == ""
    assert match_badge(1) == "[* 1 Match]"
    assert match_badge(3) == "[* 3 Matches]"


def test_render_view_states() -> None:
    service = SearchService()
    store = make_store(("a.pdf", "React\ndeveloper"), ("b.pdf", "Go"))

    assert render_view(service.view(DocumentStore(), ""), DocumentStore()) == EMPTY_STORE_MESSAGE

    listing = render_view(service.view(store, ""), store)
    assert listing.startswith("All Uploaded Resumes (2)")
    assert "a.pdf\n  React developer..." in listing

    matching = render_view(service.view(store, "react"), store)
    assert matching.startswith("Matching Resumes (1)")
    assert "a.pdf  [* 1 Match]" in matching

    none = render_view(service.view(store, "rust"), store)
    assert none.endswith(NO_MATCHES_MESSAGE)

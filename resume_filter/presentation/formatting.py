"""Plain-text rendering of ranked documents."""
from resume_filter.core.models.document import DocumentStore, ScoredDocument
from resume_filter.core.services.search_service import SearchView

EMPTY_STORE_MESSAGE = "Your resume list is empty\nUpload some resumes to get started!"
NO_MATCHES_MESSAGE = "No resumes found matching your keywords."


def match_badge(score: int) -> str:
    """Badge shown next to the name; empty for unscored documents."""
    if score <= 0:
        return ""
    return f"[* {score} Match{'es' if score > 1 else ''}]"


def render_card(scored: ScoredDocument, preview_length: int = 150) -> str:
    header = scored.name
    badge = match_badge(scored.score)
    if badge:
        header = f"{header}  {badge}"
    preview = " ".join(scored.preview(preview_length).split())
    return f"{header}\n  {preview}..."


def render_view(
    view: SearchView, store: DocumentStore, preview_length: int = 150
) -> str:
    if len(store) == 0:
        return EMPTY_STORE_MESSAGE

    lines = [view.title, ""]
    for scored in view.results:
        lines.append(render_card(scored, preview_length))
        lines.append("")
    if view.filtered and not view.results:
        lines.append(NO_MATCHES_MESSAGE)
    return "\n".join(lines).rstrip()

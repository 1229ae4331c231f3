from infralib.domain.items import Category, SortOrder
from infralib.viewmodels.catalog_format import (
    NO_DESCRIPTION,
    category_label,
    short_description,
    sort_label,
    tutorial_label,
)


def test_short_description_truncates_long_text() -> None:
    text = "x" * 150

    assert short_description(text) == "x" * 100 + "..."
    assert short_description("x" * 100) == "x" * 100


def test_short_description_placeholder_for_empty() -> None:
    assert short_description("") == NO_DESCRIPTION
    assert short_description(None) == NO_DESCRIPTION


def test_tutorial_label_depends_on_link() -> None:
    assert tutorial_label("https://loom.com/x") == "Ver Tutorial"
    assert tutorial_label(None) == "Tutorial Pendiente"
    assert tutorial_label("  ") == "Tutorial Pendiente"


def test_sort_and_category_labels() -> None:
    assert sort_label(SortOrder.ASC) == "Más antiguos primero"
    assert sort_label(SortOrder.DESC) == "Más recientes primero"
    assert [category_label(c) for c in Category] == ["n8n Templates", "Flowise Templates", "Voice Agents"]

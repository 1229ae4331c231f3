from infralib.domain.items import ActionKind, ArchiveFile, ArchiveItem, TemplateItem, VoiceAgentItem
from infralib.viewmodels.catalog_format import PLACEHOLDER_IMAGE
from infralib.web_ui.viewmodels import build_card, build_cards, build_detail_panel


def test_template_card_projection() -> None:
    item = TemplateItem(
        name="Lead Scraper",
        date="2024-05-01",
        description="d" * 120,
        image="https://cdn/img.png",
        tutorial_link="https://loom.com/x",
        payload="{}",
    )

    card = build_card(item)

    assert card.description.endswith("...")
    assert card.tooltip == "d" * 120
    assert card.image_src == "https://cdn/img.png"
    assert card.tutorial_label == "Ver Tutorial"
    assert card.tutorial_href == "https://loom.com/x"
    assert card.primary_label == "Descargar"
    assert card.opens_link is False


def test_voice_agent_card_uses_placeholder_and_link_button() -> None:
    card = build_card(VoiceAgentItem(name="Agent", external_url="https://drive/x"))

    assert card.image_src == PLACEHOLDER_IMAGE
    assert card.primary_label == "Ir a Carpeta Drive"
    assert card.opens_link is True
    assert card.tutorial_href is None
    assert card.tutorial_label == "Tutorial Pendiente"


def test_build_cards_keeps_order() -> None:
    cards = build_cards([TemplateItem(name="B"), TemplateItem(name="A")])

    assert [card.title for card in cards] == ["B", "A"]


def test_detail_panel_for_template() -> None:
    panel = build_detail_panel(TemplateItem(name="T", payload="{}", source_url="https://n8n.io/w"))

    assert [button.kind for button in panel.actions] == [
        ActionKind.COPY_PAYLOAD,
        ActionKind.DOWNLOAD_PAYLOAD,
        ActionKind.COPY_REFERENCE_URL,
    ]
    assert [button.label for button in panel.actions] == ["Copiar JSON", "Descargar JSON", "Copiar URL"]
    assert not panel.lists_files


def test_detail_panel_for_archive_lists_numbered_files_only() -> None:
    item = ArchiveItem(
        name="Bundle",
        payload="{}",
        files=(ArchiveFile("first.json", "/a"), ArchiveFile("second.json", "/b")),
    )

    panel = build_detail_panel(item)

    assert panel.actions == []
    assert [(row.index, row.label) for row in panel.files] == [(0, "1. first.json"), (1, "2. second.json")]

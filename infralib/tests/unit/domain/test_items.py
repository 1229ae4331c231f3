from __future__ import annotations

import json

import pytest

from infralib.domain.items import (
    ActionKind,
    ArchiveFile,
    ArchiveItem,
    Category,
    ItemKind,
    SortOrder,
    TemplateItem,
    VoiceAgentItem,
    available_actions,
    parse_item,
)


def _template_record(**overrides):
    record = {
        "nombre": "Lead Scraper",
        "json": '{"nodes": []}',
        "url": "https://n8n.io/workflows/1",
        "imagen": "https://cdn/img.png",
        "loom": "https://loom.com/share/abc",
        "descripcion": "Scrapes leads",
        "fecha": "2024-05-01",
        "precio": 0,
    }
    record.update(overrides)
    return record


def test_parse_template_record_maps_wire_fields() -> None:
    item = parse_item(_template_record(), Category.TEMPLATE)

    assert isinstance(item, TemplateItem)
    assert item.kind is ItemKind.TEMPLATE
    assert item.name == "Lead Scraper"
    assert item.payload == '{"nodes": []}'
    assert item.source_url == "https://n8n.io/workflows/1"
    assert item.tutorial_link == "https://loom.com/share/abc"
    assert item.price == 0.0
    assert item.identity == ("Lead Scraper", "2024-05-01")


def test_parse_voice_agent_uses_url_as_external_link() -> None:
    record = {
        "nombre": "Receptionist",
        "imagen": "",
        "loom": None,
        "descripcion": None,
        "fecha": "2024-06-01",
        "precio": None,
        "url": "https://drive.google.com/folder/1",
    }
    item = parse_item(record, Category.VOICE_AGENT)

    assert isinstance(item, VoiceAgentItem)
    assert item.external_url == "https://drive.google.com/folder/1"
    assert item.description == ""
    assert item.tutorial_link is None
    assert not item.has_tutorial
    assert item.has_external_url
    assert not item.has_payload


def test_parse_archive_keeps_file_order_and_skips_malformed_entries() -> None:
    record = _template_record(
        archivo=[
            {"title": "b.json", "path": "/files/b"},
            "junk",
            {"title": "no-path"},
            {"title": "a.json", "path": "/files/a"},
        ]
    )
    item = parse_item(record, Category.FLOW)

    assert isinstance(item, ArchiveItem)
    assert item.kind is ItemKind.ARCHIVE
    assert item.files == (ArchiveFile("b.json", "/files/b"), ArchiveFile("a.json", "/files/a"))
    assert item.has_files


def test_empty_archive_list_is_a_plain_template() -> None:
    item = parse_item(_template_record(archivo=[]), Category.FLOW)

    assert type(item) is TemplateItem


def test_malformed_record_is_tolerated() -> None:
    item = parse_item({"precio": "gratis", "json": {"a": 1}}, Category.TEMPLATE)

    assert item.name == ""
    assert item.date == ""
    assert item.price is None
    assert json.loads(item.payload) == {"a": 1}


def test_available_actions_for_each_variant() -> None:
    template = parse_item(_template_record(), Category.TEMPLATE)
    bare_template = parse_item(_template_record(json="", url=""), Category.TEMPLATE)
    voice = VoiceAgentItem(name="v", external_url="https://drive/x")
    voice_without_url = VoiceAgentItem(name="v")
    archive = parse_item(_template_record(archivo=[{"title": "a", "path": "/a"}]), Category.FLOW)

    assert available_actions(template) == (
        ActionKind.COPY_PAYLOAD,
        ActionKind.DOWNLOAD_PAYLOAD,
        ActionKind.COPY_REFERENCE_URL,
    )
    assert available_actions(bare_template) == (ActionKind.DOWNLOAD_PAYLOAD,)
    assert available_actions(voice) == (ActionKind.OPEN_EXTERNAL_LINK, ActionKind.COPY_REFERENCE_URL)
    assert available_actions(voice_without_url) == (ActionKind.OPEN_EXTERNAL_LINK,)
    assert available_actions(archive) == (ActionKind.DOWNLOAD_ARCHIVE_FILE,)


def test_whitespace_fields_count_as_absent() -> None:
    item = TemplateItem(name="t", payload="   ", source_url=" ")

    assert not item.has_payload
    assert not item.has_reference_url


def test_to_wire_round_trips_field_names() -> None:
    item = ArchiveItem(
        name="Bundle",
        date="2024-01-01",
        payload=None,
        files=(ArchiveFile("a.txt", "/a"),),
    )

    wire = item.to_wire()

    assert wire["nombre"] == "Bundle"
    assert wire["fecha"] == "2024-01-01"
    assert wire["archivo"] == [{"title": "a.txt", "path": "/a"}]
    assert "json" in wire and "url" in wire


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("n8n", Category.TEMPLATE),
        ("template", Category.TEMPLATE),
        ("Flowise", Category.FLOW),
        ("flow", Category.FLOW),
        ("retell", Category.VOICE_AGENT),
        ("voiceAgent", Category.VOICE_AGENT),
        ("VOICE_AGENT", Category.VOICE_AGENT),
    ],
)
def test_category_parse_accepts_aliases(raw: str, expected: Category) -> None:
    assert Category.parse(raw) is expected


def test_category_parse_rejects_unknown() -> None:
    with pytest.raises(ValueError):
        Category.parse("zapier")


def test_sort_order_toggle_and_parse() -> None:
    assert SortOrder.ASC.toggled() is SortOrder.DESC
    assert SortOrder.DESC.toggled() is SortOrder.ASC
    assert SortOrder.parse("DESC") is SortOrder.DESC
    with pytest.raises(ValueError):
        SortOrder.parse("newest")

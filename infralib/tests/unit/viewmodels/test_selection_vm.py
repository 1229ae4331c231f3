from infralib.domain.items import TemplateItem
from infralib.viewmodels.selection_vm import SelectionVM


def _vm_with_counter():
    events = []
    vm = SelectionVM(on_changed=lambda v: events.append((v.open_item, v.enlarged_image_url)))
    return vm, events


def test_image_and_detail_are_independent() -> None:
    vm, _ = _vm_with_counter()
    item = TemplateItem(name="A", date="d")

    vm.enlarge_image("https://cdn/a.png")
    vm.open_detail(item)
    vm.dismiss_image()

    assert vm.open_item is item
    assert vm.detail_open
    assert not vm.image_open


def test_closing_detail_keeps_enlarged_image() -> None:
    vm, _ = _vm_with_counter()
    vm.open_detail(TemplateItem(name="A"))
    vm.enlarge_image("https://cdn/a.png")

    vm.close_detail()

    assert vm.enlarged_image_url == "https://cdn/a.png"


def test_listeners_fire_only_on_change() -> None:
    vm, events = _vm_with_counter()
    item = TemplateItem(name="A")

    vm.open_detail(item)
    vm.open_detail(item)
    vm.close_detail()
    vm.close_detail()
    vm.dismiss_image()

    assert len(events) == 2


def test_enlarge_ignores_empty_url() -> None:
    vm, events = _vm_with_counter()

    vm.enlarge_image("")
    vm.enlarge_image("   ")
    vm.enlarge_image(None)

    assert not vm.image_open
    assert events == []


def test_clear_resets_both_overlays() -> None:
    vm, events = _vm_with_counter()
    vm.open_detail(TemplateItem(name="A"))
    vm.enlarge_image("https://cdn/a.png")
    events.clear()

    vm.clear()

    assert vm.open_item is None
    assert vm.enlarged_image_url is None
    assert events == [(None, None)]


def test_opening_another_item_replaces_the_open_one() -> None:
    vm, events = _vm_with_counter()
    first = TemplateItem(name="A", date="2024-01-01")
    second = TemplateItem(name="B", date="2024-01-02")

    vm.open_detail(first)
    vm.open_detail(second)

    assert vm.open_item is second
    assert events == [(first, None), (second, None)]

    vm.close_detail()

    assert vm.open_item is None

from infralib.domain.items import Category, SortOrder, TemplateItem
from infralib.domain.ports import UNREACHABLE, UseCaseError
from infralib.viewmodels.catalog_vm import CatalogViewState, CatalogVM, FetchPhase


def test_initial_state_is_idle_with_defaults() -> None:
    vm = CatalogVM()

    assert vm.category is Category.TEMPLATE
    assert vm.sort_order is SortOrder.DESC
    assert vm.view_state is CatalogViewState.IDLE
    assert vm.items == ()


def test_begin_fetch_enters_loading_and_drops_items() -> None:
    vm = CatalogVM()
    first = vm.begin_fetch()
    vm.complete(first, [TemplateItem(name="A")])

    ticket = vm.begin_fetch()

    assert ticket.generation == first.generation + 1
    assert vm.phase is FetchPhase.LOADING
    assert vm.view_state is CatalogViewState.LOADING
    assert vm.items == ()


def test_ticket_captures_parameters_at_initiation() -> None:
    vm = CatalogVM(category=Category.FLOW, sort_order=SortOrder.ASC)

    ticket = vm.begin_fetch()
    vm.set_category(Category.VOICE_AGENT)

    assert ticket.category is Category.FLOW
    assert ticket.sort_order is SortOrder.ASC


def test_stale_completion_is_discarded() -> None:
    vm = CatalogVM()
    old = vm.begin_fetch()
    new = vm.begin_fetch()

    assert vm.complete(new, [TemplateItem(name="new")]) is True
    assert vm.complete(old, [TemplateItem(name="old")]) is False
    assert vm.fail(old, UseCaseError(UNREACHABLE, "late")) is False
    assert [item.name for item in vm.items] == ["new"]
    assert vm.error is None


def test_failure_keeps_error_and_empties_items() -> None:
    vm = CatalogVM()
    ticket = vm.begin_fetch()

    vm.fail(ticket, UseCaseError(UNREACHABLE, "down"))

    assert vm.view_state is CatalogViewState.FAILED
    assert vm.error.message == "down"
    assert vm.items == ()


def test_empty_and_ready_states() -> None:
    vm = CatalogVM()
    vm.complete(vm.begin_fetch(), [])
    assert vm.view_state is CatalogViewState.EMPTY

    vm.complete(vm.begin_fetch(), [TemplateItem(name="A")])
    assert vm.view_state is CatalogViewState.READY


def test_parameter_setters_report_change() -> None:
    vm = CatalogVM()

    assert vm.set_category(Category.TEMPLATE) is False
    assert vm.set_category(Category.FLOW) is True
    assert vm.set_sort_order(SortOrder.DESC) is False
    assert vm.set_sort_order(SortOrder.ASC) is True


def test_listener_notified_for_each_transition() -> None:
    seen = []
    vm = CatalogVM(on_changed=lambda v: seen.append(v.view_state))

    ticket = vm.begin_fetch()
    vm.complete(ticket, [])

    assert seen == [CatalogViewState.LOADING, CatalogViewState.EMPTY]

"""Tests for the client API wrapper and the candidate view-model.

The view-model talks to the real app through FastAPI's ``TestClient``,
which is an ``httpx.Client``.
"""

from __future__ import annotations

from datetime import date
from unittest.mock import MagicMock

import httpx
import pytest
from fastapi.testclient import TestClient

from candidate_tracker.client.api import ApiError, CandidateApiClient
from candidate_tracker.client.view_model import CandidateViewModel, empty_form
from candidate_tracker.db.store import InMemoryCandidateStore
from candidate_tracker.models.candidate import CandidateCreate


class FakeClock:
    def __init__(self) -> None:
        self.now = 100.0

    def __call__(self) -> float:
        return self.now


@pytest.fixture()
def api(test_client: TestClient) -> CandidateApiClient:
    return CandidateApiClient(http=test_client)


@pytest.fixture()
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture()
def vm(api: CandidateApiClient, clock: FakeClock) -> CandidateViewModel:
    model = CandidateViewModel(api, clock=clock, success_ttl=3.0)
    model.mount()
    return model


class TestApiClient:
    def test_error_message_from_server(self, api: CandidateApiClient) -> None:
        with pytest.raises(ApiError) as exc_info:
            api.delete_candidate("missing")
        assert exc_info.value.message == "Candidate not found"
        assert exc_info.value.status_code == 404

    def test_transport_failure_becomes_api_error(self) -> None:
        def _refuse(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("refused", request=request)

        http = httpx.Client(base_url="http://test", transport=httpx.MockTransport(_refuse))
        with CandidateApiClient(http=http) as client:
            with pytest.raises(ApiError) as exc_info:
                client.list_candidates()
        assert exc_info.value.message == "Failed to fetch candidates"
        assert exc_info.value.status_code is None

    def test_non_json_error_uses_fallback(self) -> None:
        http = httpx.Client(
            base_url="http://test",
            transport=httpx.MockTransport(lambda request: httpx.Response(502, text="bad gateway")),
        )
        with pytest.raises(ApiError) as exc_info:
            CandidateApiClient(http=http).delete_candidate("1")
        assert exc_info.value.message == "Failed to delete candidate"
        assert exc_info.value.status_code == 502

    def test_html_success_body_becomes_api_error(self) -> None:
        http = httpx.Client(
            base_url="http://test",
            transport=httpx.MockTransport(
                lambda request: httpx.Response(
                    200, text="<html>proxy</html>", headers={"Content-Type": "text/html"}
                )
            ),
        )
        with pytest.raises(ApiError) as exc_info:
            CandidateApiClient(http=http).list_candidates()
        assert exc_info.value.message == "Failed to fetch candidates"
        assert exc_info.value.status_code == 200

    def test_malformed_candidate_becomes_api_error(self) -> None:
        http = httpx.Client(
            base_url="http://test",
            transport=httpx.MockTransport(
                lambda request: httpx.Response(201, json={"id": "9", "name": ""})
            ),
        )
        api = CandidateApiClient(http=http)
        payload = CandidateCreate(
            name="Asha Patel",
            email="asha@example.com",
            phone="+1 (555) 987-6543",
            role="Data Engineer",
            status="Applied",
        )
        with pytest.raises(ApiError) as exc_info:
            api.create_candidate(payload)
        assert exc_info.value.message == "Failed to add candidate"

    def test_delete_with_non_object_body(self) -> None:
        http = httpx.Client(
            base_url="http://test",
            transport=httpx.MockTransport(lambda request: httpx.Response(200, json=["done"])),
        )
        with pytest.raises(ApiError) as exc_info:
            CandidateApiClient(http=http).delete_candidate("1")
        assert exc_info.value.message == "Failed to delete candidate"

    def test_mount_with_html_body_shows_message(self, clock: FakeClock) -> None:
        http = httpx.Client(
            base_url="http://test",
            transport=httpx.MockTransport(
                lambda request: httpx.Response(200, text="<html>proxy</html>")
            ),
        )
        model = CandidateViewModel(CandidateApiClient(http=http), clock=clock)
        model.mount()
        assert model.error == "Failed to fetch candidates"
        assert model.candidates == []
        assert model.is_loading is False


class TestMount:
    def test_mount_loads_once(self, clock: FakeClock) -> None:
        api = MagicMock()
        api.list_candidates.return_value = []
        model = CandidateViewModel(api, clock=clock)
        assert model.is_loading is True

        model.mount()
        model.mount()

        api.list_candidates.assert_called_once()
        assert model.is_loading is False

    def test_mount_populates_list(self, vm: CandidateViewModel) -> None:
        assert [c.id for c in vm.candidates] == ["1", "2", "3"]
        assert vm.error is None

    def test_load_failure_sets_error(self, clock: FakeClock) -> None:
        api = MagicMock()
        api.list_candidates.side_effect = ApiError("Failed to fetch candidates", 500)
        model = CandidateViewModel(api, clock=clock)
        model.mount()
        assert model.error == "Failed to fetch candidates"
        assert model.candidates == []
        assert model.is_loading is False


class TestSubmit:
    def test_create_appends_and_resets_form(
        self, vm: CandidateViewModel, store: InMemoryCandidateStore, valid_payload: dict[str, str]
    ) -> None:
        vm.update_form(**valid_payload)
        assert vm.submit() is True

        assert vm.candidates[-1].name == valid_payload["name"]
        assert store.count() == 4
        assert vm.success == "Candidate added successfully!"
        assert vm.form == empty_form()
        assert vm.is_submitting is False

    def test_client_validation_blocks_api_call(self, clock: FakeClock) -> None:
        api = MagicMock()
        api.list_candidates.return_value = []
        model = CandidateViewModel(api, clock=clock)
        model.update_form(name="A", email="bad-email", phone="123", role="Dev")

        assert model.submit() is False
        assert set(model.form_errors) == {"name", "email", "phone"}
        api.create_candidate.assert_not_called()

    def test_typing_clears_field_error(self, vm: CandidateViewModel) -> None:
        vm.submit()
        assert "name" in vm.form_errors
        vm.update_form(name="Someone")
        assert "name" not in vm.form_errors

    def test_update_form_rejects_unknown_field(self, vm: CandidateViewModel) -> None:
        with pytest.raises(KeyError):
            vm.update_form(salary="lots")

    def test_edit_replaces_by_id(self, vm: CandidateViewModel) -> None:
        target = vm.candidates[1]
        vm.start_edit(target)
        assert vm.form["name"] == "Kush"

        vm.update_form(role="Staff Backend Developer", status="Offered")
        assert vm.submit() is True

        updated = vm.candidates[1]
        assert updated.id == target.id
        assert updated.date_added == target.date_added
        assert updated.role == "Staff Backend Developer"
        assert vm.editing is None
        assert vm.success == "Candidate updated successfully!"

    def test_server_error_message_shown(self, vm: CandidateViewModel, store: InMemoryCandidateStore) -> None:
        target = vm.candidates[0]
        vm.start_edit(target)
        store.remove(target.id)

        assert vm.submit() is False
        assert vm.error == "Candidate not found"
        assert vm.editing is target

    def test_cancel_edit_makes_no_call(self, clock: FakeClock) -> None:
        api = MagicMock()
        model = CandidateViewModel(api, clock=clock)
        candidate = MagicMock()
        candidate.editable_fields.return_value = {**empty_form(), "name": "Kush"}
        model.start_edit(candidate)
        model.cancel_edit()

        assert model.editing is None
        assert model.form == empty_form()
        api.update_candidate.assert_not_called()


class TestSuccessMessage:
    def test_auto_clears_after_delay(self, vm: CandidateViewModel, clock: FakeClock) -> None:
        assert vm.delete("3") is True
        assert vm.success == "Candidate deleted successfully!"
        clock.now += 2.9
        assert vm.success is not None
        clock.now += 0.2
        assert vm.success is None


class TestDelete:
    def test_declined_confirmation_skips_api(self, api: CandidateApiClient, store: InMemoryCandidateStore) -> None:
        confirm = MagicMock(return_value=False)
        model = CandidateViewModel(api, confirm=confirm)
        model.mount()

        assert model.delete("1") is False
        confirm.assert_called_once_with("Are you sure you want to delete this candidate?")
        assert store.count() == 3
        assert len(model.candidates) == 3

    def test_delete_clears_matching_edit(self, vm: CandidateViewModel, store: InMemoryCandidateStore) -> None:
        vm.start_edit(vm.candidates[0])
        assert vm.delete("1") is True

        assert [c.id for c in vm.candidates] == ["2", "3"]
        assert store.count() == 2
        assert vm.editing is None
        assert vm.deleting_id is None

    def test_delete_keeps_other_edit(self, vm: CandidateViewModel) -> None:
        vm.start_edit(vm.candidates[0])
        vm.delete("2")
        assert vm.editing is not None

    def test_delete_failure_keeps_list(self, vm: CandidateViewModel, store: InMemoryCandidateStore) -> None:
        store.remove("2")
        assert vm.delete("2") is False
        assert vm.error == "Candidate not found"
        assert len(vm.candidates) == 3


class TestListingView:
    def test_search_sort_and_export(self, vm: CandidateViewModel) -> None:
        vm.search("developer")
        vm.sort_by("name")
        assert [c.name for c in vm.visible] == ["Krish Kumar", "Kush", "Naman"]
        assert vm.summary == "Showing 3 of 3 candidates"

        vm.search("full stack")
        exported = vm.export(today=date(2026, 10, 18))
        assert exported is not None
        filename, content = exported
        assert filename == "candidates_2026-10-18.csv"
        assert content.splitlines()[1].startswith('"Naman"')

    def test_export_nothing_visible(self, vm: CandidateViewModel) -> None:
        vm.search("nobody matches this")
        assert vm.visible == []
        assert vm.export() is None

    def test_refresh_reloads_from_server(self, vm: CandidateViewModel, store: InMemoryCandidateStore) -> None:
        store.remove("1")
        assert len(vm.candidates) == 3
        vm.refresh()
        assert [c.id for c in vm.candidates] == ["2", "3"]

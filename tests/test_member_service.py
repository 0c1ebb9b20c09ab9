"""Tests for member endpoints."""

import pytest

from d4h_client import ClientConfig, D4HClient, D4HRequestError, EntityType, Member, MemberUpdate
from tests.fakes import BASE_URL, calls, make_response, page


def test_get_member_stamps_member_type(client, session):
    session.request.return_value = make_response(200, {"id": 42, "name": "Jane Doe"})

    member = client.get_member("team", 12, 42)

    assert isinstance(member, Member)
    assert member.type is EntityType.MEMBER
    assert member.name == "Jane Doe"
    assert member.custom_fields is None
    [(method, url, kwargs)] = calls(session)
    assert method == "GET"
    assert url == f"{BASE_URL}/team/12/members/42"
    assert kwargs["params"] is None


def test_get_member_include_details(client, session):
    session.request.return_value = make_response(200, {"id": 42})

    client.get_member("team", 12, 42, include_details=True)

    [(_, _, kwargs)] = calls(session)
    assert kwargs["params"] == {"include_details": "true"}


def test_get_member_include_details_false_is_not_sent(client, session):
    session.request.return_value = make_response(200, {"id": 42})

    client.get_member("team", 12, 42, include_details=False)

    [(_, _, kwargs)] = calls(session)
    assert kwargs["params"] is None


def test_get_member_keeps_unknown_fields(client, session):
    session.request.return_value = make_response(200, {"id": 42, "email": {"value": "j@example.com"}})

    member = client.get_member("organisation", 3, 42)

    assert member.model_extra["email"] == {"value": "j@example.com"}


def test_get_member_overrides_type_in_payload(client, session):
    session.request.return_value = make_response(200, {"id": 42, "type": "group"})

    assert client.get_member("team", 12, 42).type is EntityType.MEMBER


def test_get_members_query_params(client, session):
    session.request.return_value = make_response(200, page([]))

    client.get_members("team", 12, group_id=5, include_details=True, include_custom_fields=True)

    [(method, url, kwargs)] = calls(session)
    assert url == f"{BASE_URL}/team/12/members"
    assert kwargs["params"] == {
        "group_id": "5",
        "include_details": "true",
        "include_custom_fields": "true",
        "page": "0",
        "size": "2",
    }


def test_get_members_without_options_sends_only_paging(client, session):
    session.request.return_value = make_response(200, page([]))

    client.get_members("team", 12)

    [(_, _, kwargs)] = calls(session)
    assert kwargs["params"] == {"page": "0", "size": "2"}


def test_get_members_stamps_every_page(client, session):
    session.request.side_effect = [
        make_response(200, page([{"id": 1}, {"id": 2}], total_size=3)),
        make_response(200, page([{"id": 3, "custom_fields": [{"id": 9, "value": "x"}]}],
                                page_number=1, total_size=3)),
    ]

    members = client.get_members("team", 12, include_custom_fields=True)

    assert [m.id for m in members] == [1, 2, 3]
    assert all(m.type is EntityType.MEMBER for m in members)
    assert members[2].custom_fields[0].value == "x"
    assert [c[2]["params"]["page"] for c in calls(session)] == ["0", "1"]


def test_update_member_sends_partial_body(client, session):
    client.update_member("team", 12, 42, MemberUpdate(position="Medic"))

    [(method, url, kwargs)] = calls(session)
    assert method == "PUT"
    assert url == f"{BASE_URL}/team/12/members/42"
    assert kwargs["json"] == {"position": "Medic"}


def test_update_member_accepts_dict(client, session):
    client.update_member("team", 12, 42, {"name": "J. Doe"})

    [(_, _, kwargs)] = calls(session)
    assert kwargs["json"] == {"name": "J. Doe"}


@pytest.mark.parametrize("updates", [{}, MemberUpdate()])
def test_update_member_without_changes_makes_no_request(client, session, updates):
    assert client.update_member("team", 12, 42, updates) is None
    session.request.assert_not_called()


def test_get_member_not_found(client, session):
    session.request.return_value = make_response(404, {"message": "Not Found"})

    with pytest.raises(D4HRequestError) as excinfo:
        client.get_member("team", 12, 404)
    assert excinfo.value.status_code == 404
    assert "Not Found" in str(excinfo.value)


def test_get_members_collects_every_capped_page(session):
    client = D4HClient(ClientConfig(token="t", base_url=BASE_URL, page_size=3), session=session)
    session.request.side_effect = [
        make_response(200, page([{"id": 1}, {"id": 2}], page_size=2, total_size=4)),
        make_response(200, page([{"id": 3}, {"id": 4}], page_number=1, page_size=2, total_size=4)),
    ]

    assert [m.id for m in client.get_members("team", 12)] == [1, 2, 3, 4]


def test_get_members_bad_item_is_a_request_error(client, session):
    session.request.return_value = make_response(200, page([{"id": 1}, {"name": "no id"}]))

    with pytest.raises(D4HRequestError):
        client.get_members("team", 12)


def test_get_member_bad_body_is_a_request_error(client, session):
    session.request.return_value = make_response(200, {"id": "not-a-number"})

    with pytest.raises(D4HRequestError) as excinfo:
        client.get_member("team", 12, 42)
    assert excinfo.value.url == f"{BASE_URL}/team/12/members/42"


def test_get_member_accepts_structured_status_and_position(client, session):
    session.request.return_value = make_response(200, {
        "id": 42,
        "status": {"id": 1, "value": "OPERATIONAL"},
        "position": {"id": 3, "title": "Medic"},
    })

    member = client.get_member("team", 12, 42)

    assert member.model_extra["status"] == {"id": 1, "value": "OPERATIONAL"}
    assert member.model_extra["position"]["title"] == "Medic"

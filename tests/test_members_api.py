"""
Member directory tests, including revoke gated by the borrow ledger.
"""
import pytest

from librarydesk.services.member_service import level_for_grade


def _members(client):
    return client.get("/get-members").get_json()["data"]


class TestAddMember:
    def test_add_member_derives_level_and_score(self, client, member_payload):
        res = client.put("/add/member", json=member_payload())

        assert res.status_code == 201
        data = res.get_json()["data"]
        assert data["stud_id"] == "S-1001"
        assert data["level"] == "Secondary"
        assert data["score"] == 10
        assert data["parentPhone"] == "5551234567"

    def test_numeric_phone_and_grade_are_accepted(self, client, member_payload):
        res = client.put("/add/member", json=member_payload(parentPhone=5551234567, grade=3))

        assert res.status_code == 201
        assert res.get_json()["data"]["level"] == "Primary"

    def test_missing_fields_are_400(self, client):
        res = client.put("/add/member", json={"name": "Ali"})

        assert res.status_code == 400
        fields = {e["field"] for e in res.get_json()["errors"]}
        assert {"stud_id", "parentPhone", "age", "grade", "section"} <= fields

    def test_non_numeric_phone_is_400(self, client, member_payload):
        assert client.put("/add/member", json=member_payload(parentPhone="call me")).status_code == 400

    def test_duplicate_stud_id_is_409(self, client, member_payload):
        client.put("/add/member", json=member_payload())
        res = client.put("/add/member", json=member_payload(name="Other Kid", parentPhone="5550000000"))

        assert res.status_code == 409
        assert "Student ID" in res.get_json()["message"]

    def test_clone_by_name_age_phone_is_409(self, client, member_payload):
        client.put("/add/member", json=member_payload())
        res = client.put("/add/member", json=member_payload(stud_id="S-2000", name="AYSE yilmaz"))

        assert res.status_code == 409
        assert len(_members(client)) == 1


class TestEditMember:
    def test_partial_update_recomputes_level(self, client, member_payload):
        client.put("/add/member", json=member_payload())

        res = client.put("/edit-member/S-1001", json={"grade": "10", "section": " C "})

        assert res.status_code == 200
        data = res.get_json()["data"]
        assert data["grade"] == "10"
        assert data["level"] == "High School"
        assert data["section"] == "C"
        assert data["name"] == "Ayse Yilmaz"

    def test_stud_id_in_body_is_ignored(self, client, member_payload):
        client.put("/add/member", json=member_payload())

        res = client.put("/edit-member/S-1001", json={"stud_id": "HACK", "score": 15})

        assert res.status_code == 200
        assert res.get_json()["data"]["stud_id"] == "S-1001"
        assert res.get_json()["data"]["score"] == 15

    def test_empty_update_is_400(self, client, member_payload):
        client.put("/add/member", json=member_payload())
        assert client.put("/edit-member/S-1001", json={}).status_code == 400

    def test_non_positive_age_is_400(self, client, member_payload):
        client.put("/add/member", json=member_payload())
        assert client.put("/edit-member/S-1001", json={"age": -3}).status_code == 400

    def test_unknown_member_is_404(self, client):
        assert client.put("/edit-member/NOPE", json={"name": "X"}).status_code == 404

    def test_malformed_id_is_400(self, client):
        assert client.put("/edit-member/bad!id", json={"name": "X"}).status_code == 400


class TestRevokeMember:
    def test_revoke_without_loans_removes_member(self, client, member_payload):
        client.put("/add/member", json=member_payload())

        res = client.delete("/revoke-member/S-1001")

        assert res.status_code == 200
        body = res.get_json()
        assert body["success"] is True
        assert "err" not in body
        assert _members(client) == []

    def test_revoke_with_open_loan_is_blocked(self, client, member_payload, borrow_payload):
        client.put("/add/member", json=member_payload())
        client.post("/add-student", json=borrow_payload())

        res = client.delete("/revoke-member/S-1001")

        assert res.status_code == 200
        body = res.get_json()
        assert body["success"] is False
        assert body["err"]
        assert [m["stud_id"] for m in _members(client)] == ["S-1001"]

    def test_revoke_allowed_after_book_returned(self, client, member_payload, borrow_payload):
        client.put("/add/member", json=member_payload())
        record_id = client.post("/add-student", json=borrow_payload()).get_json()["data"]["id"]
        client.delete(f"/return-book/{record_id}")

        res = client.delete("/revoke-member/S-1001")

        assert res.status_code == 200
        assert res.get_json()["success"] is True
        assert _members(client) == []

    def test_revoke_unknown_member_is_404(self, client):
        assert client.delete("/revoke-member/S-404").status_code == 404

    def test_revoke_malformed_id_is_400(self, client):
        assert client.delete("/revoke-member/bad!id").status_code == 400


@pytest.mark.parametrize("grade, level", [
    ("1", "Primary"),
    ("5", "Primary"),
    ("6", "Secondary"),
    ("8", "Secondary"),
    ("9", "High School"),
    ("12", "High School"),
    ("0", "Undefined"),
    ("13", "Undefined"),
    ("kg", "Undefined"),
])
def test_level_for_grade(grade, level):
    assert level_for_grade(grade) == level

"""
Shelf catalog tests.
"""


class TestShelf:
    def test_add_and_list(self, client, shelf_book):
        res = client.put("/add-shelf", json={"bookDets": shelf_book()})

        assert res.status_code == 201
        data = res.get_json()["data"]
        assert data["identifierKey"] == "ol-OL123W"
        assert data["bookData"]["subject"] == ["Fantasy"]
        assert [i["identifierKey"] for i in client.get("/shelf-item").get_json()["data"]] == ["ol-OL123W"]

    def test_duplicate_key_is_409(self, client, shelf_book):
        client.put("/add-shelf", json={"bookDets": shelf_book()})
        res = client.put("/add-shelf", json={"bookDets": shelf_book(title="Another Title")})

        assert res.status_code == 409
        assert res.get_json()["details"] == {"identifierKey": "ol-OL123W"}

    def test_missing_key_or_title_is_400(self, client):
        assert client.put("/add-shelf", json={"bookDets": {"title": "No Key"}}).status_code == 400
        assert client.put("/add-shelf", json={"bookDets": {"key": "gb-1", "title": " "}}).status_code == 400
        assert client.put("/add-shelf", json={}).status_code == 400

    def test_manual_add_generates_key(self, client):
        res = client.put("/shelf-manual", json={"bookName": "Local Zine", "bookAuthor": "Class 7B"})

        assert res.status_code == 201
        data = res.get_json()["data"]
        assert data["identifierKey"].startswith("manual-")
        assert data["bookData"]["title"] == "Local Zine"
        assert data["bookData"]["author_name"] == ["Class 7B"]

    def test_delete_free_item(self, client, shelf_book):
        item_id = client.put("/add-shelf", json={"bookDets": shelf_book()}).get_json()["data"]["id"]

        assert client.delete(f"/shelf-item/{item_id}").status_code == 200
        assert client.get("/shelf-item").get_json()["data"] == []

    def test_delete_unknown_item_is_404(self, client):
        assert client.delete("/shelf-item/77").status_code == 404

    def test_delete_malformed_id_is_400(self, client):
        assert client.delete("/shelf-item/x1").status_code == 400
        assert client.delete("/shelf-item/99999999999999999999999").status_code == 400

    def test_delete_blocked_when_borrowed_by_key(self, client, shelf_book, borrow_payload):
        item_id = client.put("/add-shelf", json={"bookDets": shelf_book()}).get_json()["data"]["id"]
        client.post("/add-student", json=borrow_payload())

        res = client.delete(f"/shelf-item/{item_id}")

        assert res.status_code == 409
        assert res.get_json()["details"]["studentId"] == "S-1001"
        assert len(client.get("/shelf-item").get_json()["data"]) == 1

    def test_delete_blocked_by_title_when_loan_has_no_key(self, client, shelf_book, borrow_payload):
        item_id = client.put("/add-shelf", json={"bookDets": shelf_book()}).get_json()["data"]["id"]
        payload = borrow_payload()
        del payload["bookDets"]["data"]["key"]
        payload["bookDets"]["data"]["title"] = "the hobbit"
        client.post("/add-student", json=payload)

        assert client.delete(f"/shelf-item/{item_id}").status_code == 409

    def test_same_title_with_other_key_does_not_block(self, client, shelf_book, borrow_payload):
        # loan'da key varsa sadece key eşleşmesine bakılır
        item_id = client.put("/add-shelf", json={"bookDets": shelf_book(key="gb-XYZ")}).get_json()["data"]["id"]
        client.post("/add-student", json=borrow_payload())

        assert client.delete(f"/shelf-item/{item_id}").status_code == 200

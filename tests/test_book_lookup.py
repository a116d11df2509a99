"""
ISBN lookup proxy tests; Open Library is never contacted.
"""
from unittest.mock import Mock

import pytest
import requests

LOOKUP_TARGET = "librarydesk.services.book_lookup_service.requests.get"


def _response(payload):
    resp = Mock()
    resp.raise_for_status.return_value = None
    resp.json.return_value = payload
    return resp


class TestBookLookup:
    def test_found(self, client, monkeypatch):
        fake_get = Mock(return_value=_response({
            "ISBN:9780261103344": {"details": {"title": "The Hobbit"}},
        }))
        monkeypatch.setattr(LOOKUP_TARGET, fake_get)

        res = client.get("/api/book/978-0261103344")

        assert res.status_code == 200
        assert res.get_json()["data"] == {
            "title": "The Hobbit",
            "coverImageUrl": "https://covers.openlibrary.org/b/isbn/9780261103344-L.jpg",
        }
        _, kwargs = fake_get.call_args
        assert kwargs["params"]["bibkeys"] == "ISBN:9780261103344"
        assert kwargs["params"]["jscmd"] == "details"

    def test_unknown_isbn_is_404(self, client, monkeypatch):
        monkeypatch.setattr(LOOKUP_TARGET, Mock(return_value=_response({})))
        assert client.get("/api/book/026110334X").status_code == 404

    def test_invalid_isbn_is_400_without_upstream_call(self, client, monkeypatch):
        fake_get = Mock()
        monkeypatch.setattr(LOOKUP_TARGET, fake_get)

        assert client.get("/api/book/12345").status_code == 400
        fake_get.assert_not_called()

    @pytest.mark.parametrize("exc", [
        requests.exceptions.ConnectionError("down"),
        requests.exceptions.Timeout("slow"),
    ])
    def test_upstream_failure_is_502(self, client, monkeypatch, exc):
        monkeypatch.setattr(LOOKUP_TARGET, Mock(side_effect=exc))

        res = client.get("/api/book/9780261103344")

        assert res.status_code == 502
        assert res.get_json()["success"] is False

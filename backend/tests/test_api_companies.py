"""Route tests for /api/v1/companies."""

URL = "/api/v1/companies"

NEW_COMPANY = {
    "handle": "new",
    "name": "New",
    "logoUrl": "http://new.img",
    "description": "DescNew",
    "numEmployees": 10,
}


class TestCreate:
    def test_admin(self, client, admin_headers) -> None:  # type: ignore[no-untyped-def]
        resp = client.post(URL, json=NEW_COMPANY, headers=admin_headers)
        assert resp.status_code == 201
        assert resp.json() == {"company": NEW_COMPANY}

    def test_non_admin_forbidden(self, client, u1_headers) -> None:  # type: ignore[no-untyped-def]
        resp = client.post(URL, json=NEW_COMPANY, headers=u1_headers)
        assert resp.status_code == 403

    def test_anon_unauthorized(self, client) -> None:  # type: ignore[no-untyped-def]
        resp = client.post(URL, json=NEW_COMPANY)
        assert resp.status_code == 401

    def test_duplicate(self, client, admin_headers) -> None:  # type: ignore[no-untyped-def]
        resp = client.post(URL, json={**NEW_COMPANY, "handle": "c1"}, headers=admin_headers)
        assert resp.status_code == 409
        assert resp.json()["error"]["message"] == "Duplicate company: c1"

    def test_missing_data(self, client, admin_headers) -> None:  # type: ignore[no-untyped-def]
        resp = client.post(URL, json={"handle": "new", "numEmployees": 10}, headers=admin_headers)
        assert resp.status_code == 422

    def test_duplicate_name(self, client, admin_headers) -> None:  # type: ignore[no-untyped-def]
        resp = client.post(URL, json={**NEW_COMPANY, "name": "C1"}, headers=admin_headers)
        assert resp.status_code == 409
        assert resp.json()["error"]["message"] == "Duplicate company name: C1"


class TestList:
    def test_anon(self, client) -> None:  # type: ignore[no-untyped-def]
        resp = client.get(URL)
        assert resp.status_code == 200
        companies = resp.json()["companies"]
        assert sorted(c["handle"] for c in companies) == ["c1", "c2", "c3"]
        assert {"handle", "name", "description", "numEmployees", "logoUrl"} == set(companies[0])

    def test_filters(self, client) -> None:  # type: ignore[no-untyped-def]
        resp = client.get(URL, params={"minEmployees": 2, "maxEmployees": 3, "name": "c3"})
        assert [c["handle"] for c in resp.json()["companies"]] == ["c3"]

    def test_bad_range(self, client) -> None:  # type: ignore[no-untyped-def]
        resp = client.get(URL, params={"minEmployees": 50, "maxEmployees": 10})
        assert resp.status_code == 400

    def test_bad_type(self, client) -> None:  # type: ignore[no-untyped-def]
        resp = client.get(URL, params={"minEmployees": "many"})
        assert resp.status_code == 422


class TestGet:
    def test_works(self, client, job_ids) -> None:  # type: ignore[no-untyped-def]
        resp = client.get(f"{URL}/c1")
        assert resp.json() == {
            "company": {
                "handle": "c1",
                "name": "C1",
                "description": "Desc1",
                "numEmployees": 1,
                "logoUrl": "http://c1.img",
                "jobs": [
                    {
                        "id": job_ids["j1"],
                        "title": "j1",
                        "salary": 1,
                        "equity": "0.1",
                        "companyHandle": "c1",
                    }
                ],
            }
        }

    def test_not_found(self, client) -> None:  # type: ignore[no-untyped-def]
        resp = client.get(f"{URL}/nope")
        assert resp.status_code == 404
        assert resp.json() == {"error": {"message": "No company: nope", "status": 404}}


class TestUpdate:
    def test_admin(self, client, admin_headers) -> None:  # type: ignore[no-untyped-def]
        resp = client.patch(f"{URL}/c1", json={"name": "C1-new"}, headers=admin_headers)
        assert resp.json() == {
            "company": {
                "handle": "c1",
                "name": "C1-new",
                "description": "Desc1",
                "numEmployees": 1,
                "logoUrl": "http://c1.img",
            }
        }

    def test_non_admin_forbidden(self, client, u1_headers) -> None:  # type: ignore[no-untyped-def]
        resp = client.patch(f"{URL}/c1", json={"name": "C1-new"}, headers=u1_headers)
        assert resp.status_code == 403

    def test_not_found(self, client, admin_headers) -> None:  # type: ignore[no-untyped-def]
        resp = client.patch(f"{URL}/nope", json={"name": "new nope"}, headers=admin_headers)
        assert resp.status_code == 404

    def test_handle_change_rejected(self, client, admin_headers) -> None:  # type: ignore[no-untyped-def]
        resp = client.patch(f"{URL}/c1", json={"handle": "c1-new"}, headers=admin_headers)
        assert resp.status_code == 422

    def test_empty_body(self, client, admin_headers) -> None:  # type: ignore[no-untyped-def]
        resp = client.patch(f"{URL}/c1", json={}, headers=admin_headers)
        assert resp.status_code == 400
        assert resp.json()["error"]["message"] == "No data"

    def test_null_on_required_field(self, client, admin_headers) -> None:  # type: ignore[no-untyped-def]
        resp = client.patch(f"{URL}/c1", json={"description": None}, headers=admin_headers)
        assert resp.status_code == 422

    def test_null_logo_allowed(self, client, admin_headers) -> None:  # type: ignore[no-untyped-def]
        resp = client.patch(f"{URL}/c1", json={"logoUrl": None}, headers=admin_headers)
        assert resp.json()["company"]["logoUrl"] is None

    def test_rename_to_taken_name(self, client, admin_headers) -> None:  # type: ignore[no-untyped-def]
        resp = client.patch(f"{URL}/c1", json={"name": "C2"}, headers=admin_headers)
        assert resp.status_code == 409


class TestDelete:
    def test_admin(self, client, admin_headers) -> None:  # type: ignore[no-untyped-def]
        resp = client.delete(f"{URL}/c1", headers=admin_headers)
        assert resp.json() == {"deleted": "c1"}

    def test_non_admin_forbidden(self, client, u1_headers) -> None:  # type: ignore[no-untyped-def]
        resp = client.delete(f"{URL}/c1", headers=u1_headers)
        assert resp.status_code == 403

    def test_not_found(self, client, admin_headers) -> None:  # type: ignore[no-untyped-def]
        resp = client.delete(f"{URL}/nope", headers=admin_headers)
        assert resp.status_code == 404

class TestCompaniesRoutes:
    def _auth(self, token):
        return {"Authorization": f"Bearer {token}"}

    def test_create_as_admin(self, client, seeded, admin_token):
        r = client.post("/companies", json={
            "handle": "new",
            "name": "New",
            "description": "DescNew",
            "numEmployees": 10,
            "logoUrl": "http://new.img",
        }, headers=self._auth(admin_token))
        assert r.status_code == 201
        assert r.json() == {"company": {
            "handle": "new",
            "name": "New",
            "description": "DescNew",
            "numEmployees": 10,
            "logoUrl": "http://new.img",
        }}

    def test_create_unauth_for_user(self, client, seeded, u1_token):
        r = client.post("/companies", json={
            "handle": "new", "name": "New", "description": "d",
        }, headers=self._auth(u1_token))
        assert r.status_code == 401

    def test_create_duplicate(self, client, seeded, admin_token):
        r = client.post("/companies", json={
            "handle": "c1", "name": "Another", "description": "d",
        }, headers=self._auth(admin_token))
        assert r.status_code == 400
        assert r.json()["detail"] == "Duplicate company: c1"

    def test_create_invalid_data(self, client, seeded, admin_token):
        r = client.post("/companies", json={
            "handle": "new", "name": "New", "description": "d", "numEmployees": "lots",
        }, headers=self._auth(admin_token))
        assert r.status_code == 422

    def test_list_anon(self, client, seeded):
        r = client.get("/companies")
        assert r.status_code == 200
        assert [c["handle"] for c in r.json()["companies"]] == ["c1", "c2", "c3"]

    def test_list_filtered(self, client, seeded):
        r = client.get("/companies", params={"minEmployees": 2, "name": "c"})
        assert [c["handle"] for c in r.json()["companies"]] == ["c2", "c3"]

    def test_list_bad_range(self, client, seeded):
        r = client.get("/companies", params={"minEmployees": 3, "maxEmployees": 1})
        assert r.status_code == 400

    def test_get_anon(self, client, seeded):
        r = client.get("/companies/c1")
        assert r.status_code == 200
        company = r.json()["company"]
        assert company["numEmployees"] == 1
        assert company["jobs"] == [{
            "id": seeded["j1"]["id"], "title": "j1", "salary": 35000, "equity": "0",
        }]

    def test_get_not_found(self, client, seeded):
        assert client.get("/companies/nope").status_code == 404

    def test_update_as_admin(self, client, seeded, admin_token):
        r = client.patch("/companies/c1", json={"name": "C1-new", "logoUrl": None},
                         headers=self._auth(admin_token))
        assert r.status_code == 200
        assert r.json()["company"]["name"] == "C1-new"
        assert r.json()["company"]["logoUrl"] is None

    def test_update_unauth_for_anon(self, client, seeded):
        assert client.patch("/companies/c1", json={"name": "x"}).status_code == 401

    def test_update_handle_rejected(self, client, seeded, admin_token):
        r = client.patch("/companies/c1", json={"handle": "c1-new"},
                         headers=self._auth(admin_token))
        assert r.status_code == 422

    def test_update_empty_body(self, client, seeded, admin_token):
        r = client.patch("/companies/c1", json={}, headers=self._auth(admin_token))
        assert r.status_code == 400

    def test_update_not_found(self, client, seeded, admin_token):
        r = client.patch("/companies/nope", json={"name": "x"}, headers=self._auth(admin_token))
        assert r.status_code == 404

    def test_delete_as_admin(self, client, seeded, admin_token):
        r = client.delete("/companies/c1", headers=self._auth(admin_token))
        assert r.status_code == 200
        assert r.json() == {"deleted": "c1"}
        assert client.get("/companies/c1").status_code == 404

    def test_delete_unauth_for_user(self, client, seeded, u1_token):
        assert client.delete("/companies/c1", headers=self._auth(u1_token)).status_code == 401

    def test_delete_not_found(self, client, seeded, admin_token):
        assert client.delete("/companies/nope", headers=self._auth(admin_token)).status_code == 404

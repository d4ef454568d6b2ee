from jobly.utils.security import decode_token


class TestAuthRoutes:
    def _auth(self, token):
        return {"Authorization": f"Bearer {token}"}

    def test_token(self, client, seeded):
        r = client.post("/auth/token", json={"username": "u1", "password": "password1"})
        assert r.status_code == 200
        assert decode_token(r.json()["token"]) == {"username": "u1", "isAdmin": False}

    def test_token_admin_flag(self, client, seeded):
        r = client.post("/auth/token", json={"username": "admin", "password": "password2"})
        assert decode_token(r.json()["token"])["isAdmin"] is True

    def test_token_wrong_password(self, client, seeded):
        r = client.post("/auth/token", json={"username": "u1", "password": "nope"})
        assert r.status_code == 401

    def test_token_missing_data(self, client, seeded):
        r = client.post("/auth/token", json={"username": "u1"})
        assert r.status_code == 422

    def test_register(self, client, seeded):
        r = client.post("/auth/register", json={
            "username": "new",
            "password": "password",
            "firstName": "first",
            "lastName": "last",
            "email": "new@email.com",
        })
        assert r.status_code == 201
        assert decode_token(r.json()["token"]) == {"username": "new", "isAdmin": False}

    def test_register_cannot_grant_admin(self, client, seeded):
        r = client.post("/auth/register", json={
            "username": "sneaky",
            "password": "password",
            "firstName": "first",
            "lastName": "last",
            "email": "sneaky@email.com",
            "isAdmin": True,
        })
        assert r.status_code == 422

    def test_register_duplicate(self, client, seeded):
        r = client.post("/auth/register", json={
            "username": "u1",
            "password": "password",
            "firstName": "first",
            "lastName": "last",
            "email": "other@email.com",
        })
        assert r.status_code == 400

    def test_register_bad_email(self, client, seeded):
        r = client.post("/auth/register", json={
            "username": "new",
            "password": "password",
            "firstName": "first",
            "lastName": "last",
            "email": "not-an-email",
        })
        assert r.status_code == 422

    def test_me(self, client, seeded, u1_token):
        r = client.get("/auth/me", headers=self._auth(u1_token))
        assert r.status_code == 200
        assert r.json()["user"]["username"] == "u1"

    def test_me_anon(self, client, seeded):
        assert client.get("/auth/me").status_code == 401

    def test_me_bad_token(self, client, seeded):
        assert client.get("/auth/me", headers=self._auth("garbage")).status_code == 401


class TestHealth:
    def test_health(self, client):
        r = client.get("/health")
        assert r.status_code == 200
        assert r.json()["status"] == "ok"

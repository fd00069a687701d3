"""Health, metrics and reset endpoint tests."""

from __future__ import annotations

import os
from pathlib import Path
import tempfile
import unittest

from fastapi.testclient import TestClient

from app.core.config import get_settings
from app.main import create_app


class _SettingsEnvCase(unittest.TestCase):
    _env_keys = (
        "CHIRPY_JWT_SECRET",
        "CHIRPY_BCRYPT_ROUNDS",
        "CHIRPY_PLATFORM",
        "CHIRPY_STATIC_DIR",
    )
    platform = "dev"

    def setUp(self) -> None:
        self._old_env = {k: os.environ.get(k) for k in self._env_keys}
        self._static_dir = tempfile.TemporaryDirectory()
        Path(self._static_dir.name, "index.html").write_text("<h1>Chirpy</h1>", encoding="utf-8")
        os.environ["CHIRPY_JWT_SECRET"] = "admin-tests-secret-0123456789abcdef0123456789abcdef"
        os.environ["CHIRPY_BCRYPT_ROUNDS"] = "4"
        os.environ["CHIRPY_PLATFORM"] = self.platform
        os.environ["CHIRPY_STATIC_DIR"] = self._static_dir.name
        get_settings.cache_clear()

    def tearDown(self) -> None:
        for key, value in self._old_env.items():
            if value is None:
                os.environ.pop(key, None)
            else:
                os.environ[key] = value
        get_settings.cache_clear()
        self._static_dir.cleanup()


class HealthAndMetricsApiTests(_SettingsEnvCase):
    def test_healthz_reports_ok(self) -> None:
        client = TestClient(create_app())

        response = client.get("/api/healthz")

        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.text, "OK")
        self.assertTrue(response.headers["content-type"].startswith("text/plain"))

    def test_static_hits_are_counted(self) -> None:
        client = TestClient(create_app())

        for _ in range(2):
            served = client.get("/app/index.html")
            self.assertEqual(served.status_code, 200)
            self.assertIn("Chirpy", served.text)
        client.get("/api/healthz")

        metrics = client.get("/admin/metrics")
        self.assertEqual(metrics.status_code, 200)
        self.assertTrue(metrics.headers["content-type"].startswith("text/html"))
        self.assertIn("Chirpy has been visited 2 times!", metrics.text)

    def test_dotfiles_under_static_dir_are_not_served(self) -> None:
        Path(self._static_dir.name, ".env").write_text("CHIRPY_JWT_SECRET=leaked\n", encoding="utf-8")
        Path(self._static_dir.name, ".git").mkdir()
        Path(self._static_dir.name, ".git", "config").write_text("[core]\n", encoding="utf-8")
        client = TestClient(create_app())

        for path in ("/app/.env", "/app/.git/config"):
            with self.subTest(path=path):
                response = client.get(path)
                self.assertEqual(response.status_code, 404)
                self.assertNotIn("leaked", response.text)


class DefaultStaticConfigApiTests(unittest.TestCase):
    _env_keys = ("CHIRPY_JWT_SECRET", "CHIRPY_STATIC_DIR")

    def setUp(self) -> None:
        self._old_env = {k: os.environ.get(k) for k in self._env_keys}
        self._old_cwd = os.getcwd()
        self._workdir = tempfile.TemporaryDirectory()
        Path(self._workdir.name, ".env").write_text("CHIRPY_JWT_SECRET=workdir-signing-secret\n", encoding="utf-8")
        Path(self._workdir.name, "index.html").write_text("<h1>Chirpy</h1>", encoding="utf-8")
        os.chdir(self._workdir.name)
        os.environ.pop("CHIRPY_JWT_SECRET", None)
        os.environ.pop("CHIRPY_STATIC_DIR", None)
        get_settings.cache_clear()

    def tearDown(self) -> None:
        os.chdir(self._old_cwd)
        for key, value in self._old_env.items():
            if value is None:
                os.environ.pop(key, None)
            else:
                os.environ[key] = value
        get_settings.cache_clear()
        self._workdir.cleanup()

    def test_nothing_is_served_from_working_directory_by_default(self) -> None:
        client = TestClient(create_app())

        env_file = client.get("/app/.env")
        self.assertEqual(env_file.status_code, 404)
        self.assertNotIn("workdir-signing-secret", env_file.text)
        self.assertEqual(client.get("/app/index.html").status_code, 404)

    def test_unmounted_static_requests_are_not_counted(self) -> None:
        client = TestClient(create_app())

        client.get("/app/index.html")

        self.assertIn("visited 0 times", client.get("/admin/metrics").text)


class DevResetApiTests(_SettingsEnvCase):
    def test_reset_clears_users_chirps_and_hits(self) -> None:
        app = create_app()
        client = TestClient(app)
        client.post("/api/users", json={"email": "gone@example.com", "password": "pw"})
        client.get("/app/index.html")

        response = client.post("/admin/reset")

        self.assertEqual(response.status_code, 200)
        self.assertEqual(app.state.store.users, {})
        self.assertEqual(app.state.store.chirps, {})
        self.assertIn("visited 0 times", client.get("/admin/metrics").text)
        relogin = client.post("/api/login", json={"email": "gone@example.com", "password": "pw"})
        self.assertEqual(relogin.status_code, 401)


class ProdResetApiTests(_SettingsEnvCase):
    platform = "prod"

    def test_reset_is_forbidden_outside_dev(self) -> None:
        app = create_app()
        client = TestClient(app)
        client.post("/api/users", json={"email": "kept@example.com", "password": "pw"})

        response = client.post("/admin/reset")

        self.assertEqual(response.status_code, 403)
        self.assertEqual(response.json()["code"], "FORBIDDEN")
        self.assertEqual(len(app.state.store.users), 1)


if __name__ == "__main__":
    unittest.main()

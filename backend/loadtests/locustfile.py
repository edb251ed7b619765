"""
Load testing script for the Radio Exitosa API using locust.

Install: pip install -e ".[loadtest]"
Run:     locust -f backend/loadtests/locustfile.py --host http://localhost:9544

Open http://localhost:8089 in your browser to configure and start the test.
Set ADMIN_TOKEN in the environment to exercise the admin user.
"""
import os
import random

from locust import HttpUser, task, between

STATION_IDS = ["lima", "arequipa", "trujillo", "chiclayo"]


class ListenerUser(HttpUser):
    """Simulates a listener with the player open: polls the on-air program."""

    wait_time = between(2, 5)
    weight = 8  # 80% of simulated users

    def on_start(self):
        self.station_id = random.choice(STATION_IDS)
        self.etag = None

    @task(5)
    def current_program(self):
        headers = {"Accept": "application/json"}
        if self.etag:
            headers["If-None-Match"] = self.etag
        with self.client.get(
            f"/api/v1/current-program?station_id={self.station_id}",
            headers=headers,
            name="/api/v1/current-program",
            catch_response=True,
        ) as response:
            if response.status_code in (200, 304):
                self.etag = response.headers.get("ETag", self.etag)
                response.success()

    @task(3)
    def list_stations(self):
        self.client.get("/api/v1/stations")

    @task(2)
    def station_programs(self):
        self.client.get(
            f"/api/v1/programs?station_id={self.station_id}",
            name="/api/v1/programs?station_id",
        )

    @task(1)
    def health_check(self):
        self.client.get("/health")


class AdminUser(HttpUser):
    """Simulates an operator watching the cache dashboard."""

    wait_time = between(3, 8)
    weight = 2  # 20% of simulated users

    def on_start(self):
        token = os.environ.get("ADMIN_TOKEN", "")
        self.headers = {"Authorization": f"Bearer {token}"} if token else {}

    @task(3)
    def cache_stats(self):
        self.client.get("/api/v1/admin/cache-stats", headers=self.headers)

    @task(2)
    def list_programs(self):
        self.client.get("/api/v1/programs", headers=self.headers)
